"""
Translate a single number.
"""

import sys

import httpx
from rich.markup import escape

from numerals.cli import client
from numerals.cli.commands.common import add_table_options, console, err_console, load_decomposer
from numerals.core.errors import NumeralError
from numerals.core.format import capitalize, parse_number


def add_subparser(subparsers):
    parser = subparsers.add_parser("say", help="Write a number as an English numeral")
    parser.add_argument("number", help="A non-negative whole number")
    parser.add_argument("--remote", action="store_true", help="Ask the API server instead of translating locally")
    add_table_options(parser)
    parser.set_defaults(func=run)


def run(args):
    if args.remote:
        run_remote(args)
        return

    decomposer = load_decomposer(args)
    try:
        phrase = capitalize(decomposer.translate(parse_number(args.number, decomposer.limit)))
    except NumeralError as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    console.print(phrase, highlight=False, soft_wrap=True)


def run_remote(args):
    try:
        result = client.translate(args.number)
    except httpx.HTTPStatusError as e:
        detail = _detail(e.response)
        err_console.print(f"[red]✗ Error: {escape(detail)}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)
    except httpx.HTTPError as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    console.print(result["phrase"], highlight=False, soft_wrap=True)


def _detail(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except ValueError:
        return response.text
    if isinstance(detail, dict):
        return detail.get("message", str(detail))
    return str(detail)
