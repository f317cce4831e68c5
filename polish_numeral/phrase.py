from __future__ import annotations

from typing import Sequence

from .config import WORD_SEPARATOR


def assemble(tokens: Sequence[str]) -> str:
    """Join tokens produced least significant first into a readable phrase."""
    return WORD_SEPARATOR.join(reversed(tokens))
