"""
Lookup table commands.
"""

import sys

import httpx
import redis
from rich.markup import escape
from rich.table import Table

from numerals.cli import client
from numerals.cli.commands.common import console, err_console
from numerals.core import config
from numerals.core.errors import NumeralError
from numerals.core.store import TableStore
from numerals.core.tables import get_redis, load_lexicon, load_scales


def add_subparser(subparsers):
    parser = subparsers.add_parser("tables", help="Lookup table management")
    tables_sub = parser.add_subparsers(dest="tables_command", required=True)

    # show
    show_p = tables_sub.add_parser("show", help="Show the bundled tables")
    show_p.add_argument("--remote", action="store_true", help="Show the tables the API server uses")
    show_p.set_defaults(func=tables_show)

    # seed
    seed_p = tables_sub.add_parser("seed", help="Copy the bundled tables into Redis")
    seed_p.add_argument("--db", type=int, default=0)
    seed_p.set_defaults(func=tables_seed)

    # clear
    clear_p = tables_sub.add_parser("clear", help="Remove the tables from Redis")
    clear_p.add_argument("--db", type=int, default=0)
    clear_p.set_defaults(func=tables_clear)


def tables_show(args):
    try:
        if args.remote:
            data = client.get_tables()
            lexicon, scales, limit = data["lexicon"], data["scales"], data["limit"]
        else:
            scale_table = load_scales()
            lexicon, scales, limit = load_lexicon().to_dict(), scale_table.to_dict(), scale_table.limit
    except (NumeralError, httpx.HTTPError) as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    words = Table(title=f"Lexicon ({len(lexicon)} words)")
    words.add_column("n", justify="right")
    words.add_column("word")
    for key, word in lexicon.items():
        words.add_row(key, word)
    console.print(words)

    tiers = Table(title=f"Scale tiers (limit {limit:,})")
    tiers.add_column("exponent", justify="right")
    tiers.add_column("word")
    for exponent, word in scales.items():
        tiers.add_row(exponent, word)
    console.print(tiers)


def tables_seed(args):
    try:
        store = TableStore(get_redis(args.db), prefix=config.REDIS_PREFIX)
        store.seed(load_lexicon(), load_scales())
    except (NumeralError, redis.RedisError) as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    console.print(
        f"[green]✓[/green] Seeded tables into Redis db {args.db} under '{escape(config.REDIS_PREFIX)}'",
        highlight=False,
    )


def tables_clear(args):
    try:
        TableStore(get_redis(args.db), prefix=config.REDIS_PREFIX).clear()
    except redis.RedisError as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    console.print(f"[green]✓[/green] Cleared tables from Redis db {args.db}", highlight=False)
