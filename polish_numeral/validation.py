from __future__ import annotations

from .config import MAX_SUPPORTED_VALUE, MIN_SUPPORTED_VALUE
from .exceptions import UnsupportedNumber


def is_supported_number(value) -> bool:
    # bool is an int subclass but never a number we spell out.
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return MIN_SUPPORTED_VALUE <= value <= MAX_SUPPORTED_VALUE


def validate(value) -> int:
    """Return the value unchanged if it can be converted, otherwise raise UnsupportedNumber."""
    if not is_supported_number(value):
        raise UnsupportedNumber(value)
    return value
