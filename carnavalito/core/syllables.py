"""Spanish syllable counting with diphthong, hiatus and sinalefa rules."""

from __future__ import annotations

import re
from typing import List, Sequence

from ..utils.text import fold

__all__ = [
    "VOWELS",
    "DIPHTHONGS",
    "HIATUS_PAIRS",
    "count_syllables",
    "count_word_syllables",
    "count_sinalefas",
    "analyze_stress",
]


VOWELS = frozenset("aeiou")

DIPHTHONGS = frozenset(
    {"ai", "ei", "oi", "ui", "au", "eu", "ou", "ia", "ie", "io", "ue", "ua", "uo"}
)

# Accent-folded forms of aá, eé, ií, oó, uú (and the reverse pairs).
HIATUS_PAIRS = frozenset({"aa", "ee", "ii", "oo", "uu"})

_ACCENTED_PATTERN = re.compile(r"[áéíóú]")
_PAROXYTONE_ENDING = re.compile(r"[aeiou][ns]?$")
_PUNCTUATION_PATTERN = re.compile(r"[^\w]", re.UNICODE)


def count_word_syllables(word: str) -> int:
    """Count syllable nuclei in a single folded word (``a-z`` only).

    A vowel opens a new nucleus unless it follows a vowel it forms a
    diphthong with. Hiatus pairs are checked first and always split.
    Words without vowels count as zero.
    """

    count = 0
    previous = ""
    for char in word:
        if char in VOWELS:
            pair = previous + char
            if previous not in VOWELS:
                count += 1
            elif pair in HIATUS_PAIRS:
                count += 1
            elif pair not in DIPHTHONGS:
                count += 1
        previous = char
    return count


def count_sinalefas(words: Sequence[str]) -> int:
    """Number of word boundaries where a final vowel meets an initial vowel."""

    total = 0
    for current, following in zip(words, words[1:]):
        if current and following and current[-1] in VOWELS and following[0] in VOWELS:
            total += 1
    return total


def count_syllables(text: str) -> int:
    """Metrical syllable count of a verse (or word), never below one.

    >>> count_syllables("casa"), count_syllables("aire"), count_syllables("leer")
    (2, 2, 2)
    """

    words: List[str] = fold(text or "").split()
    if not words:
        return 1
    total = sum(count_word_syllables(word) for word in words)
    total -= count_sinalefas(words)
    return max(1, total)


def _stress_label(word: str) -> str:
    if _ACCENTED_PATTERN.search(word):
        return "accented"
    if len(word) > 2:
        return "paroxytone" if _PAROXYTONE_ENDING.search(word) else "oxytone"
    return "unstressed"


def analyze_stress(verse: str) -> str:
    """Informational stress pattern, one label per word joined with ``-``.

    Written accents are read from the original spelling; unaccented words
    follow the default Spanish rule (vowel, ``n`` or ``s`` ending means the
    stress falls on the penultimate syllable).
    """

    labels = []
    for token in (verse or "").lower().split():
        word = _PUNCTUATION_PATTERN.sub("", token)
        if word:
            labels.append(_stress_label(word))
    return "-".join(labels)
