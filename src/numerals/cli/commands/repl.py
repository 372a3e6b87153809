"""
Interactive loop: read a number, echo how it was read, ask for another.
"""

from numerals.cli.commands.common import add_table_options, console, err_console, load_decomposer
from numerals.core.decompose import Decomposer
from numerals.core.errors import NumeralError
from numerals.core.format import confirmation, mark, parse_number


PROMPT = "Please enter a number and I'll write it as an English numeral for you:"
RETRY = "Do you want to test another? y/n"


def add_subparser(subparsers):
    parser = subparsers.add_parser("repl", help="Translate numbers interactively")
    add_table_options(parser)
    parser.set_defaults(func=run)


def run(args):
    session(load_decomposer(args))


def session(decomposer: Decomposer, read=input):
    """Prompt until the user declines another round or input runs out."""
    while True:
        console.print(PROMPT, highlight=False)
        try:
            text = read()
        except EOFError:
            return

        answer_once(decomposer, text)

        console.print(RETRY, highlight=False)
        try:
            again = read()
        except EOFError:
            return
        if again.strip() not in ("y", "Y"):
            return


def answer_once(decomposer: Decomposer, text: str) -> bool:
    try:
        number = parse_number(text, decomposer.limit)
        phrase = decomposer.translate(number)
    except NumeralError as e:
        err_console.print(f"{mark(text)} {e}", markup=False, highlight=False, soft_wrap=True)
        return False

    console.print(confirmation(text, number, phrase), markup=False, highlight=False, soft_wrap=True)
    return True
