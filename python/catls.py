#!/usr/bin/env python3
"""
Name: catls
Description: a program launcher for the cat and ls tools
License: artistic2
"""

import sys
import argparse
import importlib

__version__ = "0.1.0"

EX_SUCCESS = 0
EX_FAILURE = 1
PROGRAM = 'catls'

TOOLS = {'cat', 'ls'}

def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description=f"Run one of the bundled tools ({', '.join(sorted(TOOLS))})."
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-l', '--list', action='store_true',
                        help='print the names of the bundled tools and exit')
    parser.add_argument('tool', nargs='?', help='the tool to run')
    parser.add_argument('tool_args', nargs=argparse.REMAINDER,
                        help='arguments handed to the tool unchanged')
    return parser

def main(argv=None):
    """Parses arguments and runs the specified tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in sorted(TOOLS):
            print(name)
        return EX_SUCCESS

    if args.tool is None:
        parser.print_help(sys.stderr)
        return EX_FAILURE

    if args.tool not in TOOLS:
        print(f"{PROGRAM}: '{args.tool}' is not a valid tool", file=sys.stderr)
        return EX_FAILURE

    # Each tool module exposes main(argv) -> exit status
    return importlib.import_module(args.tool).main(args.tool_args)

if __name__ == "__main__":
    sys.exit(main())
