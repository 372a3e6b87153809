# tests/test_decompose.py
"""Tests for the recursive decomposer."""

import pytest

from numerals.core.decompose import Decomposer
from numerals.core.errors import InvalidInput, TableError, UnsupportedMagnitude
from numerals.core.format import parse_number
from numerals.core.lexicon import ENGLISH, Lexicon
from numerals.core.scale import ScaleTable


@pytest.fixture
def decomposer():
    return Decomposer(Lexicon.english(), ScaleTable.english())


# === Direct hits ===

@pytest.mark.parametrize("n", sorted(ENGLISH))
def test_direct_hit(decomposer, n):
    assert decomposer.translate(n) == ENGLISH[n]


# === Two digits ===

def test_fifty_seven(decomposer):
    assert decomposer.translate(57) == "fifty seven"


def test_two_digit_composition(decomposer):
    for n in range(21, 100):
        if n % 10 == 0:
            continue
        expected = f"{decomposer.translate(n - n % 10)} {decomposer.translate(n % 10)}"
        assert decomposer.translate(n) == expected


# === Hundreds ===

def test_hundreds_conjunction(decomposer):
    assert decomposer.translate(205) == "two hundred and five"


def test_round_hundred(decomposer):
    assert decomposer.translate(200) == "two hundred"
    assert decomposer.translate(100) == "one hundred"


def test_hundreds_with_two_digits(decomposer):
    assert decomposer.translate(999) == "nine hundred and ninety nine"
    assert decomposer.translate(110) == "one hundred and ten"


# === Higher tiers ===

def test_thousands_single_conjunction(decomposer):
    phrase = decomposer.translate(4205)
    assert phrase == "four thousand two hundred and five"
    assert phrase.count(" and ") == 1


def test_no_conjunction_after_thousand(decomposer):
    assert decomposer.translate(1001) == "one thousand one"
    assert decomposer.translate(3050) == "three thousand fifty"


def test_round_thousand(decomposer):
    assert decomposer.translate(3000) == "three thousand"


def test_multi_word_head(decomposer):
    assert decomposer.translate(342_000) == "three hundred and forty two thousand"


def test_millions(decomposer):
    assert decomposer.translate(251_334_506) == (
        "two hundred and fifty one million "
        "three hundred and thirty four thousand "
        "five hundred and six"
    )


def test_skipped_tiers(decomposer):
    assert decomposer.translate(7_000_000_001) == "seven billion one"
    assert decomposer.translate(10 ** 12) == "one trillion"


def test_quadrillion(decomposer):
    assert decomposer.translate(2 * 10 ** 15) == "two quadrillion"


# === Boundary: the final tier is usable up to the ceiling ===

def test_just_below_ceiling_succeeds(decomposer):
    phrase = decomposer.translate(10 ** 18 - 1)
    assert phrase.startswith("nine hundred and ninety nine quadrillion ")
    assert phrase.endswith(" nine hundred and ninety nine")


def test_ceiling_rejected(decomposer):
    with pytest.raises(UnsupportedMagnitude) as exc:
        decomposer.translate(10 ** 18)
    assert exc.value.limit == 10 ** 18
    assert exc.value.value == 10 ** 18
    assert "1,000,000,000,000,000,000" in str(exc.value)


def test_above_ceiling_rejected(decomposer):
    for n in (10 ** 18 + 1, 5 * 10 ** 18, 10 ** 40):
        with pytest.raises(UnsupportedMagnitude):
            decomposer.translate(n)


def test_lower_ceiling():
    decomposer = Decomposer(Lexicon.english(), ScaleTable.english(ceiling_exponent=16))
    assert decomposer.limit == 10 ** 16
    assert decomposer.translate(10 ** 16 - 1).startswith("nine quadrillion ")
    with pytest.raises(UnsupportedMagnitude):
        decomposer.translate(10 ** 16)


# === Preconditions ===

def test_negative_rejected(decomposer):
    with pytest.raises(InvalidInput, match="negative"):
        decomposer.translate(-5)


@pytest.mark.parametrize("value", [1.0, "12", True, None])
def test_non_integer_rejected(decomposer, value):
    with pytest.raises(InvalidInput):
        decomposer.translate(value)


def test_inconsistent_lexicon_is_a_table_fault(decomposer):
    class HoleyLexicon:
        def lookup(self, n):
            return None if n == 30 else ENGLISH.get(n)

    broken = Decomposer(HoleyLexicon(), decomposer.scales)
    with pytest.raises(TableError, match="30"):
        broken.translate(30)


# === Purity ===

def test_same_input_same_phrase(decomposer):
    assert decomposer.translate(987_654_321) == decomposer.translate(987_654_321)


def test_tables_untouched(decomposer):
    before = (decomposer.lexicon.to_dict(), decomposer.scales.to_dict())
    decomposer.translate(123_456_789_012)
    assert (decomposer.lexicon.to_dict(), decomposer.scales.to_dict()) == before


def test_default_tables():
    assert Decomposer().translate(4205) == "four thousand two hundred and five"


def test_huge_value_rejected_cleanly(decomposer):
    with pytest.raises(UnsupportedMagnitude) as exc:
        decomposer.translate(10 ** 5000)
    assert exc.value.limit == 10 ** 18
    assert len(str(exc.value)) < 100


def test_huge_parsed_input_rejected(decomposer):
    with pytest.raises(UnsupportedMagnitude):
        decomposer.translate(parse_number("9" * 5000, decomposer.limit))
