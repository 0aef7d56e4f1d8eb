"""Tokenising of raw document text into normalised words."""

from __future__ import annotations

import re

DELIMITERS = " \t\n\r-.,!?;:\"'()[]{}<>"

_SPLIT_RE = re.compile("[" + re.escape(DELIMITERS) + "]+")


def is_word_char(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z" or "0" <= c <= "9")


def normalize(text: str) -> str:
    """Lower-case printable ASCII and turn every other character into a space."""
    return "".join(ch.lower() if 32 <= ord(ch) <= 126 else " " for ch in text)


def split(text: str) -> list[str]:
    """Normalise ``text`` and split it into words on punctuation and whitespace."""
    return [token for token in _SPLIT_RE.split(normalize(text)) if token]