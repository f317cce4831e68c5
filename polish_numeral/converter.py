from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .encoder import encode
from .phrase import assemble
from .validation import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolishNumeral:
    """A supported number paired with its Polish spelling, computed on construction."""

    number: int
    words: str = field(init=False)

    def __post_init__(self) -> None:
        number = validate(self.number)
        tokens = encode(number)
        logger.debug("Converted %d into %d word(s)", number, len(tokens))
        object.__setattr__(self, "words", assemble(tokens))

    def __str__(self) -> str:
        return self.words

    def get_number(self) -> int:
        return self.number

    def get_words(self) -> str:
        return self.words


def convert(value: int) -> PolishNumeral:
    """Spell ``value`` out in Polish, raising UnsupportedNumber for invalid input."""
    return PolishNumeral(value)


def number_to_words_pl(value: int) -> str:
    """Shortcut returning only the phrase."""
    return convert(value).words
