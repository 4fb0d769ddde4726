"""Improvement suggestions for whole poems and single verses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..utils.text import fold
from .lexicon import CARNIVAL_HINTS
from .meter import MetricAnalysis
from .rhyme import RhymeAnalysis, RhymeSuggestions, extract_ending, find_rhymes
from .syllables import count_syllables

__all__ = [
    "Improvement",
    "VerseAdvice",
    "suggest_improvements",
    "advise_verse",
]


MAX_VARIATION = 2
SHORT_VERSE = 6
LONG_VERSE = 12
WEAK_RHYME_QUALITIES = frozenset({"none", "weak"})


@dataclass(frozen=True)
class Improvement:
    kind: str
    priority: str
    description: str
    details: str
    verse: Optional[str] = None
    examples: Tuple[str, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": self.kind,
            "priority": self.priority,
            "description": self.description,
            "details": self.details,
        }
        if self.verse is not None:
            payload["verse"] = self.verse
        if self.examples:
            payload["examples"] = list(self.examples)
        return payload


def suggest_improvements(metrics: MetricAnalysis, rhyme: RhymeAnalysis) -> List[Improvement]:
    suggestions: List[Improvement] = []

    variation = metrics.classification.variation
    if variation > MAX_VARIATION:
        suggestions.append(
            Improvement(
                kind="meter",
                priority="high",
                description="Even out the number of syllables per verse",
                details=f"Current variation: {variation} syllables",
            )
        )

    if rhyme.quality in WEAK_RHYME_QUALITIES:
        suggestions.append(
            Improvement(
                kind="rhyme",
                priority="medium",
                description="Strengthen the rhyme between verses",
                details=f"Current quality: {rhyme.quality}",
            )
        )

    for verse in metrics.verses:
        if verse.syllables < SHORT_VERSE or verse.syllables > LONG_VERSE:
            suggestions.append(
                Improvement(
                    kind="verse",
                    priority="medium",
                    description=f"Verse {verse.position}: adjust its length",
                    details=f"{verse.syllables} syllables - aim for 7 to 11",
                    verse=verse.text,
                )
            )

    return suggestions


@dataclass(frozen=True)
class VerseAdvice:
    verse: str
    current_syllables: int
    target_syllables: int
    suggestions: Tuple[Improvement, ...]
    ending: str
    word_count: int
    has_carnival_words: bool
    rhymes: Optional[RhymeSuggestions] = None

    @property
    def difference(self) -> int:
        return self.target_syllables - self.current_syllables

    def as_dict(self) -> Dict[str, Any]:
        return {
            "original_verse": self.verse,
            "current_syllables": self.current_syllables,
            "target_syllables": self.target_syllables,
            "difference": self.difference,
            "suggestions": [suggestion.as_dict() for suggestion in self.suggestions],
            "analysis": {
                "ending": self.ending,
                "words": self.word_count,
                "has_carnival_words": self.has_carnival_words,
            },
        }


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def advise_verse(verse: str, target_syllables: int = 8) -> VerseAdvice:
    """How to bring ``verse`` to ``target_syllables`` and what rhymes with it."""

    current = count_syllables(verse)
    difference = target_syllables - current
    suggestions: List[Improvement] = []

    if difference > 0:
        suggestions.append(
            Improvement(
                kind="add_syllables",
                priority="medium",
                description=f"Add {difference} syllable{_plural(difference)}",
                details=f"{current} of {target_syllables} syllables",
                examples=(
                    'Use articles: "el mar" instead of "mar"',
                    'Add adjectives: "azul mar" instead of "mar"',
                    "Use longer synonyms",
                ),
            )
        )
    elif difference < 0:
        excess = -difference
        suggestions.append(
            Improvement(
                kind="remove_syllables",
                priority="medium",
                description=f"Remove {excess} syllable{_plural(excess)}",
                details=f"{current} of {target_syllables} syllables",
                examples=(
                    'Use contractions: "del" instead of "de el"',
                    "Drop unnecessary articles",
                    "Use shorter synonyms",
                ),
            )
        )
    else:
        suggestions.append(
            Improvement(
                kind="perfect_meter",
                priority="low",
                description="The verse already has the target meter",
                details=f"{current} syllables",
            )
        )

    ending = extract_ending(verse)
    rhymes = find_rhymes(ending.word, limit=5) if ending.word else None
    if rhymes is not None and (rhymes.consonant or rhymes.assonant):
        suggestions.append(
            Improvement(
                kind="rhyme_suggestions",
                priority="low",
                description="Words that rhyme with this verse",
                details=f"Ending: {ending.consonant}",
                examples=tuple(dict.fromkeys(rhymes.consonant + rhymes.assonant))[:5],
            )
        )

    words = set(fold(verse).split())
    return VerseAdvice(
        verse=verse,
        current_syllables=current,
        target_syllables=target_syllables,
        suggestions=tuple(suggestions),
        ending=ending.consonant,
        word_count=len((verse or "").split()),
        has_carnival_words=bool(words & CARNIVAL_HINTS),
        rhymes=rhymes,
    )
