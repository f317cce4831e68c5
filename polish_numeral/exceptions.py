from __future__ import annotations

from .config import MAX_SUPPORTED_VALUE, MIN_SUPPORTED_VALUE


class PolishNumeralError(Exception):
    """Base class for every failure raised by the converter."""


class UnsupportedNumber(PolishNumeralError, ValueError):
    """Input is not an integer or lies outside the supported range."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"Unsupported number {value!r}: expected an integer between "
            f"{MIN_SUPPORTED_VALUE} and {MAX_SUPPORTED_VALUE}."
        )


class WordDoesNotExist(PolishNumeralError, LookupError):
    """The lexicon has no word stored for the requested value."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"No word stored for {value}.")


class CaseDoesNotExist(PolishNumeralError, LookupError):
    """No inflected magnitude noun is configured for the magnitude/class pair."""

    def __init__(self, magnitude: int, number_class: int) -> None:
        self.magnitude = magnitude
        self.number_class = number_class
        super().__init__(f"No case word for magnitude {magnitude} and class {number_class}.")
