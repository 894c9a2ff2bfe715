from collections import namedtuple
import logging
import string

from markelf.errors import InvalidAbiNumberError, UnknownAbiNameError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# References:
# https://refspecs.linuxfoundation.org/elf/gabi4+/ch4.eheader.html#elfid
# https://man7.org/linux/man-pages/man5/elf.5.html

AbiEntry = namedtuple('AbiEntry', 'code name')

# code 5 is unassigned
ABIS = (
    AbiEntry(0, 'sysv'),
    AbiEntry(1, 'hpux'),
    AbiEntry(2, 'netbsd'),
    AbiEntry(3, 'linux'),
    AbiEntry(4, 'hurd'),
    AbiEntry(6, 'solaris'),
    AbiEntry(7, 'aix'),
    AbiEntry(8, 'irix'),
    AbiEntry(9, 'freebsd'),
    AbiEntry(10, 'tru64'),
    AbiEntry(11, 'modesto'),
    AbiEntry(12, 'openbsd'),
    AbiEntry(13, 'openvms'),
    AbiEntry(14, 'nonstopkernel'),
    AbiEntry(15, 'aros'),
    AbiEntry(16, 'fenix'),
    AbiEntry(17, 'cloudabi'),
    AbiEntry(18, 'openvos'),
)

ABI_CODES = {abi.name: abi.code for abi in ABIS}


def is_abi_number(arg):
    """Numeric literals are recognized by their leading character."""
    return len(arg) > 0 and arg[0] in string.digits


def parse_abi_number(arg):
    if not all(c in string.digits for c in arg):
        raise InvalidAbiNumberError('error: invalid ABI number.')
    try:
        return int(arg, 10)
    except ValueError as e:
        # too many digits for int()
        raise InvalidAbiNumberError('error: invalid ABI number.') from e


def lookup_abi_name(arg):
    code = ABI_CODES.get(arg.lower())
    if code is None:
        raise UnknownAbiNameError('error: invalid ABI name.')
    return code


def resolve(arg):
    """Resolve an OS/ABI argument to its numeric EI_OSABI code.

    Arguments starting with a decimal digit are parsed as a literal code and
    are passed through without consulting the table (nor its 0-18 range).
    A digit-led argument that is not all digits (such as 3abc) is rejected as
    an invalid number rather than looked up as a name.
    Anything else is matched case-insensitively against the known ABI names.
    """
    if is_abi_number(arg):
        code = parse_abi_number(arg)
        log.info('abi: literal {} -> {}'.format(arg, code))
        return code

    code = lookup_abi_name(arg)
    log.info('abi: name {} -> {}'.format(arg, code))
    return code
