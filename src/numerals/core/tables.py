# src/numerals/core/tables.py
"""
Loading the lookup tables.

Tables live in Java-style .properties files (key=value, one per line)
or in Redis (see numerals.core.store). Either way they are read once,
turned into frozen Lexicon / ScaleTable values and handed to a
Decomposer.
"""

import logging
import re
from pathlib import Path

import redis

from numerals.core import config
from numerals.core.decompose import Decomposer
from numerals.core.errors import TableError
from numerals.core.lexicon import Lexicon
from numerals.core.scale import ScaleTable
from numerals.core.store import TableStore


logger = logging.getLogger(__name__)

# key=value, key: value or key value
PROPERTY_LINE = re.compile(r"^\s*([^=:\s]+)\s*[=:\s]\s*(.*?)\s*$")


def parse_properties(text: str, source: str = "<string>") -> dict[str, str]:
    """Parse properties text. Blank lines and #/! comments are skipped."""
    props = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped[0] in "#!":
            continue
        m = PROPERTY_LINE.match(line)
        if not m or not m.group(2):
            raise TableError(f"{source}:{lineno}: malformed property line: {line!r}")
        props[m.group(1)] = m.group(2)
    return props


def read_properties(path: Path) -> dict[str, str]:
    if not path.exists():
        raise TableError(f"Can't load property file located at \"{path}\"")
    logger.debug(f"Reading {path}")
    return parse_properties(path.read_text(encoding="utf-8"), source=str(path))


def load_lexicon(resources_dir: Path | None = None) -> Lexicon:
    resources_dir = Path(resources_dir or config.RESOURCES_DIR)
    mapping = {}
    for name in config.LEXICON_FILES:
        mapping.update(read_properties(resources_dir / name))
    lexicon = Lexicon.from_mapping(mapping)
    logger.info(f"Loaded lexicon with {len(lexicon)} words from {resources_dir}")
    return lexicon


def load_scales(
    resources_dir: Path | None = None,
    ceiling_exponent: int | None = None,
) -> ScaleTable:
    resources_dir = Path(resources_dir or config.RESOURCES_DIR)
    if ceiling_exponent is None:
        ceiling_exponent = config.CEILING_EXPONENT
    mapping = read_properties(resources_dir / config.SCALES_FILE)
    scales = ScaleTable.from_mapping(mapping, ceiling_exponent)
    logger.info(f"Loaded {len(scales.entries)} scale tiers from {resources_dir} (limit 10^{ceiling_exponent})")
    return scales


def get_redis(db: int = 0) -> redis.Redis:
    return redis.Redis(host=config.REDIS_HOST, port=config.REDIS_PORT, db=db)


def load_tables(
    source: str | None = None,
    db: int = 0,
    resources_dir: Path | None = None,
) -> tuple[Lexicon, ScaleTable]:
    """Load both tables from "files" (default) or "redis"."""
    source = source or config.TABLE_SOURCE
    if source == "files":
        return load_lexicon(resources_dir), load_scales(resources_dir)
    if source == "redis":
        store = TableStore(get_redis(db), prefix=config.REDIS_PREFIX)
        return store.load()
    available = ", ".join(config.TABLE_SOURCES)
    raise ValueError(f"Unknown table source: {source}. Available: {available}")


def build_decomposer(
    source: str | None = None,
    db: int = 0,
    resources_dir: Path | None = None,
) -> Decomposer:
    lexicon, scales = load_tables(source, db, resources_dir)
    return Decomposer(lexicon, scales)
