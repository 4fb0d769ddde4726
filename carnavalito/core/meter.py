"""Metrical pattern classification over per-verse syllable counts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Sequence, Tuple

from .lexicon import CARNIVAL_FORMS
from .verses import Verse

__all__ = [
    "METER_NAMES",
    "SEGUIDILLA_PATTERN",
    "FREE_METER",
    "MeterClassification",
    "MetricAnalysis",
    "classify_meter",
    "analyze_metrics",
    "match_carnival_forms",
]


METER_NAMES = MappingProxyType(
    {
        6: "Hexasyllabic",
        7: "Heptasyllabic",
        8: "Octosyllabic",
        9: "Eneasyllabic",
        11: "Hendecasyllabic",
    }
)
SEGUIDILLA_PATTERN: Tuple[int, ...] = (7, 5, 7, 5)
FREE_METER = "Free meter"


@dataclass(frozen=True)
class MeterClassification:
    pattern: str
    mean_syllables: float
    variation: int
    is_regular: bool
    mode: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern,
            "average_syllables": self.mean_syllables,
            "syllable_variation": self.variation,
            "is_regular": self.is_regular,
            "dominant_meter": self.mode,
        }


def _pattern_name(counts: Sequence[int]) -> str:
    distinct = set(counts)
    if len(distinct) == 1:
        count = counts[0]
        return METER_NAMES.get(count, f"{count} syllables")
    if tuple(counts) == SEGUIDILLA_PATTERN:
        return "Seguidilla"
    return FREE_METER


def classify_meter(counts: Sequence[int]) -> MeterClassification:
    """Name the meter of ``counts`` and summarise them.

    The mode breaks ties in favour of the value met first when reading the
    counts left to right. An empty sequence gives a zeroed free-meter result.
    """

    counts = [int(count) for count in counts]
    if not counts:
        return MeterClassification(FREE_METER, 0.0, 0, True, 0)

    variation = max(counts) - min(counts)
    # Counter keeps first-seen order and most_common sorts stably
    mode = Counter(counts).most_common(1)[0][0]
    return MeterClassification(
        pattern=_pattern_name(counts),
        mean_syllables=round(sum(counts) / len(counts), 2),
        variation=variation,
        is_regular=variation <= 1,
        mode=mode,
    )


@dataclass(frozen=True)
class MetricAnalysis:
    verses: Tuple[Verse, ...]
    classification: MeterClassification

    @property
    def syllable_counts(self) -> List[int]:
        return [verse.syllables for verse in self.verses]

    @property
    def pattern(self) -> str:
        return self.classification.pattern

    def as_dict(self) -> Dict[str, Any]:
        return {
            "verses": [verse.as_dict() for verse in self.verses],
            "pattern": self.classification.pattern,
            "statistics": self.classification.as_dict(),
        }


def analyze_metrics(verses: Sequence[Verse]) -> MetricAnalysis:
    verses = tuple(verses)
    return MetricAnalysis(
        verses=verses,
        classification=classify_meter([verse.syllables for verse in verses]),
    )


def match_carnival_forms(counts: Sequence[int], scheme: str) -> List[str]:
    """Names of the traditional strophes whose meter and rhyme scheme match exactly."""

    counts = tuple(int(count) for count in counts)
    return [
        template.name
        for template in CARNIVAL_FORMS.values()
        if template.verses == len(counts)
        and template.syllables == counts
        and template.rhyme == scheme
    ]
