"""Text normalisation shared by the syllable and rhyme analysers."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["strip_accents", "fold", "letters_only"]


_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_NON_LETTER_OR_SPACE_PATTERN = re.compile(r"[^a-z\s]")


def strip_accents(text: str) -> str:
    """Drop combining marks after NFD decomposition (``cádiz`` -> ``cadiz``, ``ñ`` -> ``n``)."""

    decomposed = unicodedata.normalize("NFD", text or "")
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def fold(text: str, *, keep_spaces: bool = True) -> str:
    """Lowercase, strip accents and remove everything but ``a-z`` (and whitespace)."""

    folded = strip_accents((text or "").lower())
    pattern = _NON_LETTER_OR_SPACE_PATTERN if keep_spaces else _NON_LETTER_PATTERN
    return pattern.sub("", folded)


def letters_only(token: str) -> str:
    return fold(token, keep_spaces=False)
