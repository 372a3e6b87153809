"""
Numerals CLI.
"""

import argparse
import logging

from numerals.cli.commands import repl, say, tables
from numerals.logging_config import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(prog="numerals", description="Write numbers as English numerals")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log table loading")
    subparsers = parser.add_subparsers(dest="command")

    say.add_subparser(subparsers)
    repl.add_subparser(subparsers)
    tables.add_subparser(subparsers)

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level=logging.DEBUG)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
