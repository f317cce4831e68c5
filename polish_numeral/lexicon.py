"""Polish number words and magnitude noun inflection tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from .config import MAGNITUDE_BASE
from .exceptions import CaseDoesNotExist, WordDoesNotExist

# Exact words. 12, 13, 17 and 18 are built from TEEN_SUFFIX instead.
WORDS = MappingProxyType(
    {
        0: "zero",
        1: "jeden",
        2: "dwa",
        3: "trzy",
        4: "cztery",
        5: "pięć",
        6: "sześć",
        7: "siedem",
        8: "osiem",
        9: "dziewięć",
        10: "dziesięć",
        11: "jedenaście",
        14: "czternaście",
        15: "piętnaście",
        16: "szesnaście",
        19: "dziewiętnaście",
        20: "dwadzieścia",
        30: "trzydzieści",
        40: "czterdzieści",
        100: "sto",
        200: "dwieście",
        1000: "tysiąc",
        10**6: "milion",
        10**9: "miliard",
        10**12: "bilion",
        10**15: "biliard",
        10**18: "trylion",
    }
)

TEEN_SUFFIX = "naście"
TENS_SUFFIX = "dziesiąt"
LOW_HUNDREDS_SUFFIX = "sta"
HIGH_HUNDREDS_SUFFIX = "set"

# Grammatical-number classes selected by the quantifying digit.
GENITIVE_PLURAL = 0
NOMINATIVE_PLURAL = 1

# Irregular magnitude nouns: magnitude -> (genitive plural, nominative plural).
CASES = MappingProxyType(
    {
        1: ("tysięcy", "tysiące"),
    }
)

# Regular magnitude nouns append these to the singular: class -> suffix.
CASE_SUFFIXES = ("ów", "y")


class LexiconMatch(NamedTuple):
    word: str | None

    @property
    def found(self) -> bool:
        return self.word is not None


def lookup(value: int) -> LexiconMatch:
    """Probe the lexicon without raising."""
    return LexiconMatch(WORDS.get(value))


def word_for(value: int) -> str:
    match = lookup(value)
    if not match.found:
        raise WordDoesNotExist(value)
    return match.word


def case_word(magnitude: int, number_class: int) -> str:
    """
    Return the magnitude noun inflected for the grammatical-number class.

    Irregular forms stored in CASES win; otherwise the singular noun for
    1000**magnitude gets the class suffix, e.g. (2, 0) -> "milionów".
    """
    forms = CASES.get(magnitude)
    if forms is not None and 0 <= number_class < len(forms):
        return forms[number_class]
    if magnitude < 1 or not 0 <= number_class < len(CASE_SUFFIXES):
        raise CaseDoesNotExist(magnitude, number_class)
    base = lookup(MAGNITUDE_BASE**magnitude)
    if not base.found:
        raise CaseDoesNotExist(magnitude, number_class)
    return base.word + CASE_SUFFIXES[number_class]
