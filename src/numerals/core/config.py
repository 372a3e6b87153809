# src/numerals/core/config.py
"""
Configuration constants.

Every value can be overridden with a NUMERALS_* environment variable.
"""

import os
from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent.parent

RESOURCES_DIR = Path(os.environ.get("NUMERALS_RESOURCES_DIR", PACKAGE_DIR / "resources"))
LEXICON_FILES = ("digits.properties", "teens.properties", "tens.properties")
SCALES_FILE = "scales.properties"

CEILING_EXPONENT = int(os.environ.get("NUMERALS_CEILING_EXPONENT", "18"))

REDIS_HOST = os.environ.get("NUMERALS_REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("NUMERALS_REDIS_PORT", "6379"))
REDIS_PREFIX = os.environ.get("NUMERALS_REDIS_PREFIX", "numerals")

TABLE_SOURCE = os.environ.get("NUMERALS_TABLE_SOURCE", "files")
TABLE_SOURCES = ("files", "redis")

API_URL = os.environ.get("NUMERALS_API_URL", "http://localhost:8000/api")
