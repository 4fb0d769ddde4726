"""Rhyme endings, scheme detection and rhyme quality for Spanish verse."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..utils.text import letters_only
from .lexicon import ASSONANT_RHYMES, CONSONANT_RHYMES
from .syllables import VOWELS

__all__ = [
    "VerseEnding",
    "VerseRhyme",
    "RhymeAnalysis",
    "RhymeSuggestions",
    "extract_ending",
    "group_label",
    "detect_rhyme_scheme",
    "classify_rhyme_type",
    "rate_rhyme_quality",
    "quality_label",
    "analyze_rhyme",
    "find_rhymes",
]


CONSONANT = "consonant"
ASSONANT = "assonant"
FREE = "free"

_QUALITY_LABELS: Tuple[Tuple[float, str], ...] = (
    (0.8, "excellent"),
    (0.6, "good"),
    (0.4, "regular"),
    (0.2, "weak"),
)


@dataclass(frozen=True)
class VerseEnding:
    """Phonetic ending of a verse's last word.

    ``consonant`` holds the last three letters; ``assonant`` the last two
    vowels, or ``""`` when the word has fewer than two. Empty patterns never
    rhyme, not even with each other.
    """

    word: str
    consonant: str
    assonant: str

    def rhymes_consonant(self, other: "VerseEnding") -> bool:
        if len(self.consonant) < 2 or len(other.consonant) < 2:
            return False
        return self.consonant[-2:] == other.consonant[-2:]

    def rhymes_assonant(self, other: "VerseEnding") -> bool:
        if not self.assonant or not other.assonant:
            return False
        return self.assonant == other.assonant

    def shares_final_letter(self, other: "VerseEnding") -> bool:
        if not self.consonant or not other.consonant:
            return False
        return self.consonant[-1] == other.consonant[-1]

    def pair_points(self, other: "VerseEnding") -> int:
        if self.rhymes_consonant(other):
            return 3
        if self.rhymes_assonant(other):
            return 2
        if self.shares_final_letter(other):
            return 1
        return 0


def extract_ending(verse: str) -> VerseEnding:
    """Ending of the last whitespace-delimited token of ``verse``.

    A token with no letters left after folding gives an empty ending.
    """

    tokens = (verse or "").split()
    word = letters_only(tokens[-1]) if tokens else ""
    vowels = "".join(char for char in word if char in VOWELS)
    return VerseEnding(
        word=word,
        consonant=word[-3:],
        assonant=vowels[-2:] if len(vowels) >= 2 else "",
    )


def group_label(index: int) -> str:
    """Label for the ``index``-th rhyme group: A..Z, then AA, AB, ..."""

    letters = string.ascii_uppercase
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = letters[remainder] + label
    return label


def detect_rhyme_scheme(endings: Sequence[VerseEnding]) -> List[str]:
    """Assign a group label to every ending in a single ordered pass.

    Each ending is matched against the first member of every group found so
    far, in discovery order: consonant rhyme first, then assonance. Grouping
    is therefore order dependent and need not be transitive.
    """

    representatives: List[Tuple[VerseEnding, str]] = []
    labels: List[str] = []
    for ending in endings:
        label = next(
            (lbl for rep, lbl in representatives if ending.rhymes_consonant(rep)),
            None,
        )
        if label is None:
            label = next(
                (lbl for rep, lbl in representatives if ending.rhymes_assonant(rep)),
                None,
            )
        if label is None:
            label = group_label(len(representatives))
            representatives.append((ending, label))
        labels.append(label)
    return labels


def classify_rhyme_type(endings: Sequence[VerseEnding]) -> str:
    pairs = list(combinations(endings, 2))
    if any(a.rhymes_consonant(b) for a, b in pairs):
        return CONSONANT
    if any(a.rhymes_assonant(b) for a, b in pairs):
        return ASSONANT
    return FREE


def rate_rhyme_quality(endings: Sequence[VerseEnding]) -> float:
    """Pairwise score in [0, 1]: 3 consonant, 2 assonant, 1 final letter."""

    pairs = list(combinations(endings, 2))
    if not pairs:
        return 0.0
    points = sum(a.pair_points(b) for a, b in pairs)
    return points / (len(pairs) * 3)


def quality_label(score: float) -> str:
    for threshold, label in _QUALITY_LABELS:
        if score > threshold:
            return label
    return "none"


@dataclass(frozen=True)
class VerseRhyme:
    position: int
    word: str
    ending: str
    vowel_pattern: str
    group: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "verse": self.position,
            "word": self.word,
            "ending": self.ending,
            "vowel_pattern": self.vowel_pattern,
            "group": self.group,
        }


@dataclass(frozen=True)
class RhymeAnalysis:
    scheme: str
    rhyme_type: str
    quality: str
    quality_score: float
    verses: Tuple[VerseRhyme, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "scheme": self.scheme,
            "type": self.rhyme_type,
            "quality": self.quality,
            "quality_score": round(self.quality_score, 4),
            "verses": [verse.as_dict() for verse in self.verses],
        }


def analyze_rhyme(
    verses: Sequence[str],
    endings: Optional[Sequence[VerseEnding]] = None,
) -> RhymeAnalysis:
    """Scheme, type and quality for ``verses``.

    ``endings`` may be passed when the caller already extracted them.
    """

    if endings is None:
        endings = [extract_ending(verse) for verse in verses]
    labels = detect_rhyme_scheme(endings)
    score = rate_rhyme_quality(endings)
    details = tuple(
        VerseRhyme(
            position=index,
            word=ending.word,
            ending=ending.consonant,
            vowel_pattern=ending.assonant,
            group=label,
        )
        for index, (ending, label) in enumerate(zip(endings, labels), start=1)
    )
    return RhymeAnalysis(
        scheme="".join(labels),
        rhyme_type=classify_rhyme_type(endings),
        quality=quality_label(score),
        quality_score=score,
        verses=details,
    )


@dataclass(frozen=True)
class RhymeSuggestions:
    word: str
    consonant_pattern: str
    assonant_pattern: str
    consonant: Tuple[str, ...]
    assonant: Tuple[str, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "patterns": {
                "consonant": self.consonant_pattern,
                "assonant": self.assonant_pattern,
            },
            "rhymes": {
                "consonant": list(self.consonant),
                "assonant": list(self.assonant),
            },
        }


def _collect(candidates, exclude: str, limit: int) -> Tuple[str, ...]:
    seen = set()
    results: List[str] = []
    if limit <= 0:
        return ()
    for candidate in candidates:
        key = letters_only(candidate)
        if key == exclude or key in seen:
            continue
        seen.add(key)
        results.append(candidate)
        if len(results) >= limit:
            break
    return tuple(results)


def find_rhymes(word: str, limit: int = 10) -> RhymeSuggestions:
    """Look ``word`` up in the static rhyme tables."""

    ending = extract_ending(word)
    folded = ending.word
    consonant_candidates: List[str] = []
    for suffix, words in CONSONANT_RHYMES.items():
        key = letters_only(suffix)
        if folded and folded.endswith(key):
            consonant_candidates.extend(words)
    assonant_candidates = ASSONANT_RHYMES.get(ending.assonant, ()) if ending.assonant else ()

    return RhymeSuggestions(
        word=folded,
        consonant_pattern=ending.consonant[-2:],
        assonant_pattern=ending.assonant,
        consonant=_collect(consonant_candidates, folded, limit),
        assonant=_collect(assonant_candidates, folded, limit),
    )
