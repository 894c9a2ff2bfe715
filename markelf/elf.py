import logging
import os
import struct

from markelf.errors import AbiRangeError, SeekError, WriteError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# References:
# https://man7.org/linux/man-pages/man5/elf.5.html
# https://en.wikipedia.org/wiki/Executable_and_Linkable_Format

# e_ident offsets
EI_CLASS = 4
EI_OSABI = 7

# EI_CLASS values
ELFCLASS32 = 1
ELFCLASS64 = 2

# highest EI_OSABI value with a known name (openvos)
MAX_KNOWN_ABI = 18


def write_byte(f, offset, value):
    """Overwrite the single byte at an absolute offset of an open file."""
    if value & 0xff != value:
        log.warning('value {} does not fit in a byte, writing 0x{:02x}'.format(value, value & 0xff))
    value &= 0xff

    try:
        f.seek(offset, os.SEEK_SET)
    except (OSError, ValueError) as e:
        raise SeekError('error: cannot seek to offset {}: {}'.format(offset, e), e) from e

    try:
        written = f.write(struct.pack('B', value))
    except (OSError, ValueError) as e:
        raise WriteError('error: cannot write offset {}: {}'.format(offset, e), e) from e
    if written is not None and written != 1:
        raise WriteError('error: short write at offset {}'.format(offset))

    log.info('write: offset {} = 0x{:02x} ({})'.format(offset, value, value))


def write_class_byte(f, want64):
    value = ELFCLASS64 if want64 else ELFCLASS32
    write_byte(f, EI_CLASS, value)


def write_abi_byte(f, code, check_range=True):
    # the range guard fires before the file is touched
    if check_range and code > MAX_KNOWN_ABI:
        raise AbiRangeError('error: cannot set an unknown ABI version.')
    if not check_range and code > MAX_KNOWN_ABI:
        log.warning('ABI code {} is above {}, writing it anyway'.format(code, MAX_KNOWN_ABI))
    write_byte(f, EI_OSABI, code)
