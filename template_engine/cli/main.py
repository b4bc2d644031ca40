"""Main CLI entry point for the template engine."""

import argparse
import sys
from typing import Optional

from .commands import render_template


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the template engine CLI."""
    parser = argparse.ArgumentParser(
        prog='render-template',
        description='Line-oriented template renderer'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    render_parser = subparsers.add_parser('render', help='Render a template file')
    render_parser.add_argument(
        'template',
        type=str,
        nargs='?',
        default='index.html',
        help='Path to template file (default: index.html)'
    )
    render_parser.add_argument(
        '-o', '--output',
        type=str,
        help='Path to output file (default: template path with .rhtml suffix)'
    )
    render_parser.add_argument(
        '--context',
        action='append',
        metavar='KEY=VALUE',
        help='Context variables (can be specified multiple times)'
    )
    render_parser.add_argument(
        '--context-file',
        type=str,
        help='Path to YAML or JSON file containing context variables'
    )
    render_parser.add_argument(
        '--sample-context',
        action='store_true',
        help='Start from the sample context (name=Bob, city=Oskemen)'
    )
    render_parser.add_argument(
        '--on-error',
        choices=['stop', 'continue', 'skip'],
        default='stop',
        help='Error handling strategy for bad lines'
    )
    render_parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Render without writing the output file'
    )
    render_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    render_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    render_parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    render_parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'render':
        return render_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
