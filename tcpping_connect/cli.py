"""Command-line interface and argument parsing for tcpping-connect."""

import argparse

from tcpping_connect.config import (
    DEFAULT_COUNT,
    DEFAULT_PORT,
    ConfigError,
    validate_count,
    validate_port,
    validate_timeout,
)

VERSION = '1.0.0'
PROG = 'tcpping-connect'

DESCRIPTION = """\
SmokePing calls: <binary> -C -x N <host> [port]
Outputs: <host> : <ms> <ms> ... (successful probes only)"""

EPILOG = """\
Environment:
  TCPPING_TIMEOUT or TCPPING_TIMEOUT_SEC  default timeout seconds"""

# Global args storage (set by parse_args)
_args = None


def _checked(validator):
    def convert(value):
        try:
            return validator(value)
        except ConfigError as e:
            raise argparse.ArgumentTypeError(str(e))
    convert.__name__ = validator.__name__.replace('validate_', '')
    return convert


def build_parser(default_timeout=1.0):
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage='%(prog)s -C -x <count> [-w <timeout_sec>] <host> [port]',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('host', help='target host name or address')
    parser.add_argument('port', nargs='?', type=_checked(validate_port), default=DEFAULT_PORT,
                        help=f'target TCP port (default {DEFAULT_PORT})')
    parser.add_argument('-C', dest='compat', action='store_true',
                        help='fping -C compatible output (always recommended)')
    parser.add_argument('-x', dest='count', metavar='<count>', type=_checked(validate_count),
                        default=DEFAULT_COUNT, help='number of connection attempts')
    parser.add_argument('-w', dest='timeout', metavar='<seconds>', type=_checked(validate_timeout),
                        default=default_timeout,
                        help=f'per-attempt timeout (float supported); default {default_timeout}')
    parser.add_argument('--debug', action='store_true', help='log each attempt to stderr')
    parser.add_argument('--version', action='version', version=f'{PROG} {VERSION}')
    return parser


def parse_args(argv=None, default_timeout=1.0):
    """Parse command-line arguments. Exits with status 2 on invalid input."""
    global _args
    _args = build_parser(default_timeout).parse_args(argv)
    return _args


def get_args():
    """Get parsed arguments. Returns None if parse_args() hasn't been called."""
    return _args
