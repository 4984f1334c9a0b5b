"""Lexical normalization of transcribed speech.

Handles:
- Case differences (Aloo / ALOO / aloo)
- Full-width / compatibility forms (Ａ→A, １→1) via NFKC
- Devanagari kept intact, including vowel signs, nukta and Devanagari digits
- Punctuation and symbols dropped (the recognizer adds commas and full stops)
"""

from __future__ import annotations

import re
import unicodedata

# Anything that is not a Latin letter, an ASCII digit, Devanagari (U+0900-U+097F)
# or whitespace; the Devanagari danda, double danda and abbreviation sign are
# punctuation even though they sit inside the block.
_STRIP_RE = re.compile(r"[^a-z0-9\u0900-\u097F\s]|[\u0964\u0965\u0970]")


def fold(text: str) -> str:
    """NFKC → lowercase → trim. Applied to catalog names and surface forms too."""
    return unicodedata.normalize("NFKC", text).lower().strip()


def tokenize(text: str | None) -> list[str]:
    """Split transcribed text into normalized word tokens.

    Never raises; empty or whitespace-only input yields an empty list.
    """
    if not text:
        return []
    cleaned = _STRIP_RE.sub("", fold(text))
    return cleaned.split()
