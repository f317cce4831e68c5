"""Turn a validated number into Polish word tokens, one digit group at a time."""

from __future__ import annotations

import logging

from .config import GROUP_SIZE
from .exceptions import CaseDoesNotExist, WordDoesNotExist
from .lexicon import (
    GENITIVE_PLURAL,
    HIGH_HUNDREDS_SUFFIX,
    LOW_HUNDREDS_SUFFIX,
    NOMINATIVE_PLURAL,
    TEEN_SUFFIX,
    TENS_SUFFIX,
    case_word,
    lookup,
    word_for,
)

logger = logging.getLogger(__name__)

UNITS, TENS, HUNDREDS = range(GROUP_SIZE)


def _number_class(digit: int) -> int:
    """2, 3 and 4 take the nominative plural, every other digit the genitive."""
    if digit < 5 and digit != 1:
        return NOMINATIVE_PLURAL
    return GENITIVE_PLURAL


def _prefix_case(group: list[str], magnitude: int) -> None:
    # Tens and hundreds only name the magnitude when the units digit did not.
    if magnitude and not group:
        group.append(case_word(magnitude, GENITIVE_PLURAL))


def _units_tokens(digit: int, magnitude: int) -> list[str]:
    if not digit:
        return []
    tokens = []
    if magnitude:
        tokens.append(case_word(magnitude, _number_class(digit)))
    tokens.append(word_for(digit))
    return tokens


def _teen_word(units_digit: int) -> str:
    match = lookup(10 + units_digit)
    if match.found:
        return match.word
    return word_for(units_digit) + TEEN_SUFFIX


def _tens_word(digit: int) -> str:
    match = lookup(digit * 10)
    if match.found:
        return match.word
    return word_for(digit) + TENS_SUFFIX


def _hundreds_word(digit: int) -> str:
    match = lookup(digit * 100)
    if match.found:
        return match.word
    suffix = LOW_HUNDREDS_SUFFIX if digit < 5 else HIGH_HUNDREDS_SUFFIX
    return word_for(digit) + suffix


def _encode_digits(digits: str) -> list[str]:
    tokens: list[str] = []
    group: list[str] = []

    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        position = index % GROUP_SIZE
        magnitude = index // GROUP_SIZE

        if position == UNITS:
            tokens.extend(group)
            group = _units_tokens(digit, magnitude)
        elif not digit:
            continue
        elif position == TENS and digit == 1:
            # The teen replaces whatever the units digit contributed, case word included.
            units_digit = int(digits[-index])
            group.clear()
            _prefix_case(group, magnitude)
            group.append(_teen_word(units_digit))
        elif position == TENS:
            _prefix_case(group, magnitude)
            group.append(_tens_word(digit))
        else:
            _prefix_case(group, magnitude)
            group.append(_hundreds_word(digit))

    tokens.extend(group)
    return tokens


def encode(number: int) -> list[str]:
    """
    Return word tokens for ``number``, least significant group first.

    Numbers with an exact lexicon entry produce that single word. Otherwise the
    decimal digits are walked right to left in groups of three; each non-empty
    group above the ones is tagged with its inflected magnitude noun, which
    lands after the group's words once the tokens are reversed.
    """
    exact = lookup(number)
    if exact.found:
        return [exact.word]
    try:
        return _encode_digits(str(number))
    except (WordDoesNotExist, CaseDoesNotExist):
        logger.error("Lexicon tables cannot spell %d", number, exc_info=True)
        raise
