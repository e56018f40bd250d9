"""Main CLI entry point for stringtools."""

import argparse
import sys
from typing import Optional

from .commands import run_shrink, run_stitch, run_subst, run_trim, run_vars


def _add_io_arguments(parser: argparse.ArgumentParser, output: bool = True):
    parser.add_argument(
        '--in',
        dest='src',
        type=str,
        help='Input file (default: stdin)'
    )
    if output:
        parser.add_argument(
            '--out',
            dest='dst',
            type=str,
            help='Output file (default: stdout)'
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the stringtools CLI."""
    parser = argparse.ArgumentParser(
        prog='stringtools',
        description='Various tools for handling strings'
    )
    parser.add_argument(
        '--config',
        type=str,
        metavar='FILE',
        help='YAML file with blank, thread, list_separator and name_pattern settings'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Subst command
    subst_parser = subparsers.add_parser('subst', help='Substitute $KEY and ${KEY} tokens')
    _add_io_arguments(subst_parser)
    subst_parser.add_argument(
        'kv',
        nargs='*',
        metavar='KEY=VALUE',
        help='KEY=VALUE pairs used for substitution'
    )

    # Vars command
    vars_parser = subparsers.add_parser('vars', help='List variables referenced by a template')
    _add_io_arguments(vars_parser, output=False)

    # Trim and shrink commands
    trim_parser = subparsers.add_parser('trim', help='Trim leading and trailing patterns')
    _add_io_arguments(trim_parser)
    trim_parser.add_argument(
        '--lead',
        type=str,
        help='Pattern to remove from the start (default: blank characters)'
    )
    trim_parser.add_argument(
        '--rear',
        type=str,
        help='Pattern to remove from the end (default: the lead pattern)'
    )
    trim_parser.add_argument(
        '--lines',
        action='store_true',
        help='Trim every line instead of the whole text'
    )

    shrink_parser = subparsers.add_parser('shrink', help='Trim and collapse blank runs')
    _add_io_arguments(shrink_parser)

    # Stitch command
    stitch_parser = subparsers.add_parser('stitch', help='Stitch items together')
    stitch_parser.add_argument(
        '--thread',
        type=str,
        help='Separator between non-blank items (default: configured thread)'
    )
    stitch_parser.add_argument(
        'items',
        nargs='*',
        help='Items to stitch'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    handlers = {
        'subst': run_subst,
        'vars': run_vars,
        'trim': run_trim,
        'shrink': run_shrink,
        'stitch': run_stitch,
    }
    handler = handlers.get(parsed_args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
