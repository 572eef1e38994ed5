"""Script filter deciding which surfaces enter the frequency table."""

from __future__ import annotations

import regex

JAPANESE_SURFACE = regex.compile(r"(?:\p{Han}|\p{Katakana}|\p{Hiragana})+")


def is_japanese_surface(text: str) -> bool:
    """True if every character of ``text`` is Han, Katakana or Hiragana."""
    return JAPANESE_SURFACE.fullmatch(text) is not None


__all__ = ["JAPANESE_SURFACE", "is_japanese_surface"]
