# src/numerals/core/format.py
"""
Text on either side of the decomposer: parsing what the user typed,
and dressing up the phrase that comes back.
"""

import re

from numerals.core.errors import InvalidInput, UnsupportedMagnitude


NUMBER_PATTERN = re.compile(r"\+?[0-9]+")

MARK = "^"
CONFIRMATION = '{marker} (Read as {number}): "{phrase}"'


def parse_number(text: str, limit: int | None = None) -> int:
    """
    Read a non-negative whole number from user input.

    Surrounding whitespace and a leading "+" are allowed, leading zeros
    are dropped ("007" reads as 7). With a limit, inputs that have more
    digits than the limit are rejected before conversion.
    """
    if text is None:
        raise InvalidInput(text, "no input")

    stripped = text.strip()
    if not stripped:
        raise InvalidInput(text, "empty input")
    if stripped.startswith("-") and NUMBER_PATTERN.fullmatch(stripped[1:]):
        raise InvalidInput(text, "negative numbers are not supported")
    if not NUMBER_PATTERN.fullmatch(stripped):
        raise InvalidInput(text)

    digits = stripped.lstrip("+").lstrip("0") or "0"
    if limit is not None and len(digits) > len(str(limit)):
        raise UnsupportedMagnitude(None, limit)
    try:
        return int(digits)
    except ValueError:
        # past the interpreter's int/str conversion limit
        raise InvalidInput(text, "too many digits") from None


def capitalize(phrase: str) -> str:
    """Upper-case the first letter only; blank phrases come back as-is."""
    if not phrase.strip():
        return phrase
    return phrase[0].upper() + phrase[1:]


def mark(text: str) -> str:
    """One caret per character of the raw input."""
    return MARK * len(text)


def confirmation(text: str, number: int, phrase: str) -> str:
    return CONFIRMATION.format(marker=mark(text), number=number, phrase=capitalize(phrase))
