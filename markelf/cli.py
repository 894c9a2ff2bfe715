import argparse
from collections import namedtuple
import logging
import sys

from markelf import abi, elf
from markelf.errors import (
    DependentFlagError,
    FileOpenError,
    MarkElfError,
    MissingFileError,
    NoActionError,
    UsageError,
)

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

Options = namedtuple('Options', 'class_requested to64_requested type_requested type_argument path verbose')


def usage():
    entries = ['{}({})'.format(entry.name, entry.code) for entry in abi.ABIS]
    # five entries per line, matching the classic markelf help screen
    lines = [', '.join(entries[i:i + 5]) for i in range(0, len(entries), 5)]
    return (
        '* markelf *\n'
        'usage: markelf [c, class], [t, type], [b, to64], [h, help] FILE\n'
        'types: ' + '\n'.join(lines) + '\n'
    )


class ArgumentParser(argparse.ArgumentParser):

    def error(self, message):
        raise UsageError('error: {}'.format(message))


class UsageAction(argparse.Action):
    """Print the usage screen and exit as soon as -h is seen."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(usage())
        parser.exit()


def build_parser():
    from markelf import __version__

    parser = ArgumentParser(
        description='Mark the class and OS/ABI bytes of an ELF header',
        prog='markelf',
        add_help=False,
    )
    parser.add_argument('files', nargs='*', help='ELF file to patch in place')
    parser.add_argument('-c', '--class', dest='class_requested', action='store_true', help='mark the ELF class (32-bit unless -b)')
    parser.add_argument('-t', '--type', dest='type_argument', type=str, metavar='TYPE',
        help='set the OS/ABI to a decimal code or a name: {}'.format(', '.join(entry.name for entry in abi.ABIS)))
    parser.add_argument('-b', '--to64', dest='to64_requested', action='store_true', help='with -c, mark as 64-bit')
    parser.add_argument('-h', '--help', action=UsageAction, help='print usage and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every byte written')
    parser.add_argument('--version', action='version', version='markelf {}'.format(__version__))
    return parser


def parse_args(argv):
    """Turn a raw argument vector into validated Options."""
    if len(argv) < 1:
        raise UsageError('error: no args are provided.')

    args = build_parser().parse_intermixed_args(argv)

    type_requested = args.type_argument is not None
    if type_requested and len(args.type_argument) == 0:
        raise UsageError('error: option \'-t\' requires a non-empty value.')

    if args.to64_requested and not args.class_requested:
        raise DependentFlagError("error: option '-b' cannot be used without the use of option '-c'.")
    if len(args.files) == 0:
        raise MissingFileError('error: no file path was provided.')
    if not args.class_requested and not type_requested:
        raise NoActionError('error: no option is provided.')

    if len(args.files) > 1:
        log.warning('ignoring extra files: {}'.format(', '.join(args.files[1:])))

    return Options(
        class_requested=args.class_requested,
        to64_requested=args.to64_requested,
        type_requested=type_requested,
        type_argument=args.type_argument,
        path=args.files[0],
        verbose=args.verbose,
    )


def run(options):
    # unbuffered so that write failures surface at the write itself
    try:
        f = open(options.path, 'r+b', buffering=0)
    except OSError as e:
        raise FileOpenError("error: cannot open file '{}' for reading and writing.".format(options.path), e) from e

    with f:
        if options.class_requested:
            elf.write_class_byte(f, options.to64_requested)
            bits = '64-bit' if options.to64_requested else '32-bit'
            print("ok: marked '{}' as {} binary.".format(options.path, bits))

        if options.type_requested:
            code = abi.resolve(options.type_argument)
            # numeric literals skip the known-ABI range guard
            literal = abi.is_abi_number(options.type_argument)
            elf.write_abi_byte(f, code, check_range=not literal)
            print("ok: marking '{}' ABI to '{}'.".format(options.path, options.type_argument))


def cli_main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except MarkElfError as e:
        raise SystemExit(e)

    log_fmt = '%(message)s'
    if options.verbose:
        logging.basicConfig(format=log_fmt, level=logging.INFO, stream=sys.stdout)

    try:
        run(options)
    except MarkElfError as e:
        raise SystemExit(e)


if __name__ == '__main__':
    cli_main()
