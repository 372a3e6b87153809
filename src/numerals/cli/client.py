"""
HTTP client for the Numerals API.
"""

import httpx

from numerals.core import config


def translate(text: str) -> dict:
    r = httpx.get(f"{config.API_URL}/numerals/{text}", timeout=10)
    r.raise_for_status()
    return r.json()


def get_tables() -> dict:
    r = httpx.get(f"{config.API_URL}/tables", timeout=10)
    r.raise_for_status()
    return r.json()
