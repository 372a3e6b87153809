# src/numerals/core/lexicon.py
"""
Lexicon of small numbers.

Exact words for the digits 0-9, the teens 10-19 and the multiples of
ten 20-90. Everything else below 100 is built from one ten-multiple and
one digit, so the table must contain exactly these keys.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from numerals.core.errors import TableError


REQUIRED_KEYS = frozenset(range(20)) | frozenset(range(20, 100, 10))

ENGLISH = {
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
}


@dataclass(frozen=True)
class Lexicon:
    words: Mapping[int, str] = field(default_factory=lambda: dict(ENGLISH))

    def __post_init__(self):
        words = dict(self.words)

        missing = sorted(REQUIRED_KEYS - words.keys())
        if missing:
            raise TableError(f"Lexicon has no word for: {', '.join(map(str, missing))}")

        extra = sorted(words.keys() - REQUIRED_KEYS)
        if extra:
            raise TableError(f"Lexicon has unexpected keys: {', '.join(map(str, extra))}")

        blank = sorted(k for k, w in words.items() if not w or not w.strip())
        if blank:
            raise TableError(f"Lexicon has blank words for: {', '.join(map(str, blank))}")

        # read-only view so the frozen dataclass is frozen all the way down
        object.__setattr__(self, "words", MappingProxyType(words))

    @classmethod
    def english(cls) -> "Lexicon":
        return cls(dict(ENGLISH))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Lexicon":
        """Build from string keys, as stored in properties files or Redis."""
        words = {}
        for key, word in mapping.items():
            try:
                number = int(key)
            except ValueError:
                raise TableError(f"Lexicon key is not a number: {key!r}") from None
            words[number] = word.strip()
        return cls(words)

    def lookup(self, n: int) -> str | None:
        return self.words.get(n)

    def to_dict(self) -> dict[str, str]:
        return {str(k): w for k, w in sorted(self.words.items())}

    def __len__(self) -> int:
        return len(self.words)
