# src/numerals/core/scale.py
"""
Scale tiers: hundred, thousand, million, ...

Each tier is a power-of-ten exponent with a word. A tier covers the
half-open range [10^e, 10^next) where next is the following tier's
exponent, or the ceiling exponent for the last tier.

    tiers:    2        3         6        ...  15            ceiling 18
    range:  [100, 1000) [1e3, 1e6) [1e6, 1e9) ... [1e15, 1e18)
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Mapping

from numerals.core.errors import TableError


DEFAULT_CEILING_EXPONENT = 18

ENGLISH = {
    2: "hundred",
    3: "thousand",
    6: "million",
    9: "billion",
    12: "trillion",
    15: "quadrillion",
}


@dataclass(frozen=True)
class ScaleTier:
    exponent: int
    word: str

    @property
    def scale(self) -> int:
        return 10 ** self.exponent


@dataclass(frozen=True)
class ScaleTable:
    entries: tuple[ScaleTier, ...] = field(
        default_factory=lambda: tuple(ScaleTier(e, w) for e, w in sorted(ENGLISH.items()))
    )
    ceiling_exponent: int = DEFAULT_CEILING_EXPONENT

    def __post_init__(self):
        entries = tuple(self.entries)
        if not entries:
            raise TableError("Scale table is empty")

        exponents = [t.exponent for t in entries]
        if exponents[0] != 2:
            raise TableError(f"Scale tiers must start at exponent 2 (hundred), got {exponents[0]}")
        if any(a >= b for a, b in zip(exponents, exponents[1:])):
            raise TableError(f"Scale exponents must be strictly ascending: {exponents}")

        blank = [t.exponent for t in entries if not t.word or not t.word.strip()]
        if blank:
            raise TableError(f"Scale table has blank words for exponents: {blank}")

        if self.ceiling_exponent <= exponents[-1]:
            raise TableError(
                f"Ceiling exponent {self.ceiling_exponent} must be above the last tier ({exponents[-1]})"
            )

        object.__setattr__(self, "entries", entries)

    @classmethod
    def english(cls, ceiling_exponent: int = DEFAULT_CEILING_EXPONENT) -> "ScaleTable":
        return cls.from_mapping(ENGLISH, ceiling_exponent)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping,
        ceiling_exponent: int = DEFAULT_CEILING_EXPONENT,
    ) -> "ScaleTable":
        """Build from {exponent: word}; keys may be ints or their string form."""
        tiers = []
        for key, word in mapping.items():
            try:
                exponent = int(key)
            except ValueError:
                raise TableError(f"Scale key is not an exponent: {key!r}") from None
            tiers.append(ScaleTier(exponent, word.strip()))
        tiers.sort(key=lambda t: t.exponent)
        return cls(tuple(tiers), ceiling_exponent)

    @property
    def limit(self) -> int:
        """Smallest unsupported magnitude."""
        return 10 ** self.ceiling_exponent

    def tiers(self) -> tuple[int, ...]:
        return tuple(t.exponent for t in self.entries)

    def lookup(self, exponent: int) -> str | None:
        for tier in self.entries:
            if tier.exponent == exponent:
                return tier.word
        return None

    def tier_for(self, n: int) -> int | None:
        """Exponent of the tier whose range holds n, or None."""
        if n >= self.limit:
            return None
        # exact integer boundaries, no float logs
        bounds = [t.scale for t in self.entries]
        index = bisect_right(bounds, n) - 1
        if index < 0:
            return None
        return self.entries[index].exponent

    def to_dict(self) -> dict[str, str]:
        return {str(t.exponent): t.word for t in self.entries}
