"""
Options shared by the commands that need lookup tables.
"""

import sys

import redis
from rich.console import Console
from rich.markup import escape

from numerals.core import config
from numerals.core.decompose import Decomposer
from numerals.core.errors import NumeralError
from numerals.core.tables import build_decomposer


console = Console()
err_console = Console(stderr=True)


def add_table_options(parser):
    parser.add_argument(
        "--source",
        choices=config.TABLE_SOURCES,
        default=config.TABLE_SOURCE,
        help="Where to load the lookup tables from",
    )
    parser.add_argument("--db", type=int, default=0, help="Redis db for --source redis")


def load_decomposer(args) -> Decomposer:
    try:
        return build_decomposer(args.source, args.db)
    except (NumeralError, redis.RedisError) as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)
