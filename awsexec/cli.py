"""Command-line interface for awsexec."""

import sys
import argparse
import logging

from . import __version__, __commit__, __date__
from .errors import AwsexecError
from .exporter import DEFAULT_EXPORTER, EXPORTERS, get_exporter
from .runner import run

# Options that consume the following token as their value
OPTIONS_WITH_VALUE = ('--exporter', '--timeout')


def build_parser():
    """Build the parser for awsexec's own options."""
    parser = argparse.ArgumentParser(
        prog='awsexec',
        usage='%(prog)s [options] [profile] -- command [args...]',
        description='Run a command with AWS credentials exported from a profile',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  awsexec dev -- aws s3 ls                 # Run 'aws s3 ls' as profile 'dev'
  AWS_PROFILE=dev awsexec -- terraform plan  # Take the profile from AWS_PROFILE
  awsexec --exporter boto3 dev -- env      # Resolve credentials with boto3
        """
    )
    
    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information'
    )
    
    parser.add_argument(
        '--exporter',
        choices=sorted(EXPORTERS),
        default=DEFAULT_EXPORTER,
        help=f'How credentials are exported (default: {DEFAULT_EXPORTER})'
    )
    
    parser.add_argument(
        '--timeout',
        type=float,
        metavar='SECONDS',
        help='Abort the credential export after this many seconds'
    )
    
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log each step to stderr'
    )
    
    return parser


def split_options(argv):
    """
    Split argv into awsexec's own options and the remaining arguments.
    
    Options are the leading tokens starting with '-' up to the first
    positional argument or '--'. Anything after that belongs to the
    profile/command syntax and is never interpreted as an option.
    """
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == '--' or not token.startswith('-'):
            break
        if token in OPTIONS_WITH_VALUE:
            index += 1
        index += 1
    return argv[:index], argv[index:]


def print_version():
    """Print version, commit and build date."""
    print(f"awsexec version {__version__}")
    print(f"commit: {__commit__}")
    print(f"date: {__date__}")


def main(argv=None):
    """Main function to parse arguments and hand over to the command."""
    if argv is None:
        argv = sys.argv[1:]
    
    options, args = split_options(list(argv))
    parser = build_parser()
    opts = parser.parse_args(options)
    
    if opts.version:
        print_version()
        return 0
    
    if opts.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr
        )
    
    try:
        run(args, exporter=get_exporter(opts.exporter, timeout=opts.timeout))
    except AwsexecError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    # Only reachable when execution was not handed over
    return 1


if __name__ == '__main__':
    sys.exit(main())
