# src/numerals/core/errors.py
"""
Errors raised while reading numbers and turning them into words.
"""


class NumeralError(Exception):
    """Base class for everything this package raises on purpose."""


class UnsupportedMagnitude(NumeralError):
    """The number is at or above the ceiling of the scale table."""

    def __init__(self, value: int | None, limit: int):
        # value is None when the input was rejected by its digit count alone
        self.value = value
        self.limit = limit
        super().__init__(f"Number is too large: numbers must be below {limit:,}")


class InvalidInput(NumeralError, ValueError):
    """Input that is not a non-negative whole number."""

    def __init__(self, text, reason: str = "not a non-negative whole number"):
        self.text = text
        self.reason = reason
        shown = text
        if isinstance(text, str) and len(text) > 40:
            shown = f"{text[:20]}...{text[-10:]}"
        super().__init__(f"Can't parse {shown!r}: {reason}")


class TableError(NumeralError):
    """Lookup table data is missing, malformed or inconsistent."""
