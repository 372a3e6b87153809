# src/numerals/core/store.py
"""
Lookup tables stored in Redis.

Two hashes per prefix:
    {prefix}:lexicon   "7" → "seven", "40" → "forty", ...
    {prefix}:scales    "2" → "hundred", "3" → "thousand", ...
and one plain key {prefix}:ceiling holding the ceiling exponent.
"""

import logging

import redis

from numerals.core.errors import TableError
from numerals.core.lexicon import Lexicon
from numerals.core.scale import DEFAULT_CEILING_EXPONENT, ScaleTable


logger = logging.getLogger(__name__)


class TableStore:
    def __init__(self, client: redis.Redis, prefix: str = "numerals"):
        self.client = client
        self.prefix = prefix

    def _lexicon_key(self) -> str:
        return f"{self.prefix}:lexicon"

    def _scales_key(self) -> str:
        return f"{self.prefix}:scales"

    def _ceiling_key(self) -> str:
        return f"{self.prefix}:ceiling"

    def seed(self, lexicon: Lexicon, scales: ScaleTable) -> None:
        """Replace whatever is stored under this prefix with the given tables."""
        pipe = self.client.pipeline()
        pipe.delete(self._lexicon_key(), self._scales_key(), self._ceiling_key())
        pipe.hset(self._lexicon_key(), mapping=lexicon.to_dict())
        pipe.hset(self._scales_key(), mapping=scales.to_dict())
        pipe.set(self._ceiling_key(), scales.ceiling_exponent)
        pipe.execute()
        logger.info(f"Seeded {len(lexicon)} words and {len(scales.entries)} tiers under '{self.prefix}'")

    def exists(self) -> bool:
        return bool(self.client.exists(self._lexicon_key())) and bool(
            self.client.exists(self._scales_key())
        )

    def load(self) -> tuple[Lexicon, ScaleTable]:
        words = self.client.hgetall(self._lexicon_key())
        tiers = self.client.hgetall(self._scales_key())
        if not words or not tiers:
            raise TableError(
                f"No tables stored under '{self.prefix}'. Run `numerals tables seed` first."
            )

        ceiling = self.client.get(self._ceiling_key())
        ceiling_exponent = int(ceiling) if ceiling is not None else DEFAULT_CEILING_EXPONENT

        lexicon = Lexicon.from_mapping(_decode(words))
        scales = ScaleTable.from_mapping(_decode(tiers), ceiling_exponent)
        logger.info(f"Loaded {len(lexicon)} words and {len(scales.entries)} tiers from Redis '{self.prefix}'")
        return lexicon, scales

    def clear(self) -> None:
        """Remove the stored tables. Useful for tests."""
        self.client.delete(self._lexicon_key(), self._scales_key(), self._ceiling_key())


def _decode(mapping: dict) -> dict[str, str]:
    return {
        (k.decode() if isinstance(k, bytes) else k): (v.decode() if isinstance(v, bytes) else v)
        for k, v in mapping.items()
    }
