# tests/test_lexicon.py
"""Tests for the small-number lexicon."""

import pytest

from numerals.core.errors import TableError
from numerals.core.lexicon import ENGLISH, Lexicon


@pytest.fixture
def lexicon():
    return Lexicon.english()


def test_lookup_digit(lexicon):
    assert lexicon.lookup(0) == "zero"
    assert lexicon.lookup(7) == "seven"


def test_lookup_teen(lexicon):
    assert lexicon.lookup(13) == "thirteen"


def test_lookup_ten_multiple(lexicon):
    assert lexicon.lookup(40) == "forty"
    assert lexicon.lookup(90) == "ninety"


def test_lookup_miss_is_none(lexicon):
    assert lexicon.lookup(21) is None
    assert lexicon.lookup(100) is None
    assert lexicon.lookup(-1) is None


def test_has_28_words(lexicon):
    assert len(lexicon) == 28


def test_from_mapping_string_keys():
    lexicon = Lexicon.from_mapping({str(k): w for k, w in ENGLISH.items()})
    assert lexicon.lookup(19) == "nineteen"
    assert lexicon == Lexicon.english()


def test_from_mapping_strips_words():
    mapping = {str(k): w for k, w in ENGLISH.items()}
    mapping["5"] = "  five  "
    assert Lexicon.from_mapping(mapping).lookup(5) == "five"


def test_from_mapping_bad_key():
    mapping = {str(k): w for k, w in ENGLISH.items()}
    mapping["five"] = "five"
    with pytest.raises(TableError, match="not a number"):
        Lexicon.from_mapping(mapping)


def test_missing_ten_multiple_rejected():
    words = dict(ENGLISH)
    del words[70]
    with pytest.raises(TableError, match="70"):
        Lexicon(words)


def test_unexpected_key_rejected():
    words = dict(ENGLISH)
    words[21] = "twenty one"
    with pytest.raises(TableError, match="unexpected"):
        Lexicon(words)


def test_blank_word_rejected():
    words = dict(ENGLISH)
    words[3] = "   "
    with pytest.raises(TableError, match="blank"):
        Lexicon(words)


def test_words_are_read_only(lexicon):
    with pytest.raises(TypeError):
        lexicon.words[1] = "uno"


def test_construction_copies_input():
    words = dict(ENGLISH)
    lexicon = Lexicon(words)
    words[1] = "uno"
    assert lexicon.lookup(1) == "one"


def test_to_dict_uses_string_keys(lexicon):
    d = lexicon.to_dict()
    assert d["0"] == "zero"
    assert d["90"] == "ninety"
    assert len(d) == 28


def test_bad_key_error_has_no_chained_context():
    mapping = {str(k): w for k, w in ENGLISH.items()}
    mapping["x"] = "ex"
    with pytest.raises(TableError) as exc:
        Lexicon.from_mapping(mapping)
    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__
