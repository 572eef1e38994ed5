"""Split raw record text into analyzer-sized fragments."""

from __future__ import annotations

import string
from typing import FrozenSet, Iterator

FULLWIDTH_BOUNDARIES: FrozenSet[str] = frozenset("，…‥。！？")
ASCII_PUNCTUATION: FrozenSet[str] = frozenset(string.punctuation)
# str.isspace() accepts the information separators, which are not Unicode White_Space.
NON_WHITESPACE_SEPARATORS: FrozenSet[str] = frozenset("\x1c\x1d\x1e\x1f")


def is_boundary(char: str) -> bool:
    """True for whitespace, ASCII punctuation and the full-width sentence marks."""
    if char.isspace():
        return char not in NON_WHITESPACE_SEPARATORS
    return char in ASCII_PUNCTUATION or char in FULLWIDTH_BOUNDARIES


def segment_text(text: str) -> Iterator[str]:
    """
    Lazily yield the non-empty fragments of ``text`` between boundary characters.

    Consecutive boundaries never produce empty fragments, so a text made only
    of boundary characters yields nothing.
    """
    start = 0
    for idx, char in enumerate(text):
        if is_boundary(char):
            if idx > start:
                yield text[start:idx]
            start = idx + 1
    if start < len(text):
        yield text[start:]


__all__ = ["ASCII_PUNCTUATION", "FULLWIDTH_BOUNDARIES", "NON_WHITESPACE_SEPARATORS", "is_boundary", "segment_text"]
