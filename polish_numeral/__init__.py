"""Spell out non-negative integers in Polish."""

from .converter import PolishNumeral, convert, number_to_words_pl
from .exceptions import CaseDoesNotExist, PolishNumeralError, UnsupportedNumber, WordDoesNotExist

__all__ = [
    "CaseDoesNotExist",
    "PolishNumeral",
    "PolishNumeralError",
    "UnsupportedNumber",
    "WordDoesNotExist",
    "convert",
    "number_to_words_pl",
]
