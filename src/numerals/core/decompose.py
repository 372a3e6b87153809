# src/numerals/core/decompose.py
"""
Recursive decomposition of a number into English words.

    4205 → "four" "thousand" + translate(205)
         → "four thousand" + "two hundred and five"

Each call returns a complete phrase. "and" is only ever placed right
after the hundreds word, so higher tiers pick it up from their
remainder.
"""

from dataclasses import dataclass, field

from numerals.core.errors import InvalidInput, TableError, UnsupportedMagnitude
from numerals.core.lexicon import Lexicon
from numerals.core.scale import ScaleTable


HUNDREDS_EXPONENT = 2
CONJUNCTION = "and"


@dataclass(frozen=True)
class Decomposer:
    lexicon: Lexicon = field(default_factory=Lexicon.english)
    scales: ScaleTable = field(default_factory=ScaleTable.english)

    @property
    def limit(self) -> int:
        return self.scales.limit

    def translate(self, n: int) -> str:
        """
        Words for n, lower case, unjoined from any surrounding text.

        Raises:
            InvalidInput: n is not a non-negative int
            UnsupportedMagnitude: n is at or above the scale ceiling
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidInput(n, "expected an integer")
        if n < 0:
            raise InvalidInput(n, "negative numbers are not supported")
        if n >= self.limit:
            raise UnsupportedMagnitude(n, self.limit)
        return self._words(n)

    def _words(self, n: int) -> str:
        word = self.lexicon.lookup(n)
        if word is not None:
            return word

        if n < 100:
            units = n % 10
            if units == 0:
                # a Lexicon always holds the tens, so this means broken data
                raise TableError(f"Lexicon has no word for {n}")
            return f"{self._words(n - units)} {self._words(units)}"

        exponent = self.scales.tier_for(n)
        if exponent is None:
            raise UnsupportedMagnitude(n, self.limit)

        scale = 10 ** exponent
        head = self._words(n // scale)
        scale_word = self.scales.lookup(exponent)
        remainder = n % scale

        if remainder == 0:
            return f"{head} {scale_word}"
        if exponent == HUNDREDS_EXPONENT:
            return f"{head} {scale_word} {CONJUNCTION} {self._words(remainder)}"
        return f"{head} {scale_word} {self._words(remainder)}"
