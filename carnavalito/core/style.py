"""Carnival-style scoring against fixed vocabulary, meter and rhyme heuristics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from ..utils.text import fold
from .lexicon import CARNIVAL_TERMS, GADITAN_TERMS
from .meter import MetricAnalysis
from .rhyme import ASSONANT, CONSONANT, RhymeAnalysis

__all__ = [
    "StyleRubric",
    "DEFAULT_STYLE_RUBRIC",
    "StyleAnalysis",
    "matched_terms",
    "style_level",
    "score_carnival_style",
]


@dataclass(frozen=True)
class StyleRubric:
    """Weights and thresholds of the carnival-style score.

    These are tuned constants, not derived from a linguistic model.
    """

    theme_word_weight: float = 0.10
    expression_weight: float = 0.15
    octosyllabic_bonus: float = 0.30
    rhyme_bonus: float = 0.20
    octosyllabic_share: float = 0.5
    vocabulary_hint_below: float = 0.3
    local_reference_hint_below: float = 0.5
    levels: Tuple[Tuple[float, str], ...] = (
        (0.8, "authentic"),
        (0.6, "stylized"),
        (0.4, "reminiscent"),
        (0.2, "slight influence"),
    )
    fallback_level: str = "not in style"


DEFAULT_STYLE_RUBRIC = StyleRubric()


@dataclass(frozen=True)
class StyleAnalysis:
    score: float
    level: str
    features: Tuple[str, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level,
            "features": list(self.features),
            "recommendations": list(self.suggestions),
        }


def matched_terms(text: str, terms: Mapping[str, str]) -> List[str]:
    """Display forms of the table entries contained anywhere in ``text``.

    Entries match as substrings of the accent-folded text, so ``mar`` is
    found inside ``amar``. Each entry is reported once.
    """

    folded = " ".join(fold(text).split())
    return [display for key, display in terms.items() if key in folded]


def style_level(score: float, rubric: StyleRubric = DEFAULT_STYLE_RUBRIC) -> str:
    for threshold, label in rubric.levels:
        if score >= threshold:
            return label
    return rubric.fallback_level


def score_carnival_style(
    verses: Sequence[str],
    metrics: MetricAnalysis,
    rhyme: RhymeAnalysis,
    rubric: StyleRubric = DEFAULT_STYLE_RUBRIC,
) -> StyleAnalysis:
    """Score how closely ``verses`` follow Cádiz carnival conventions.

    Each distinct theme word or expression counts once however often it
    appears. The result is fully determined by the inputs.
    """

    text = " ".join(verses)
    score = 0.0
    features: List[str] = []

    for word in matched_terms(text, CARNIVAL_TERMS):
        score += rubric.theme_word_weight
        features.append(f'Carnival vocabulary: "{word}"')

    for expression in matched_terms(text, GADITAN_TERMS):
        score += rubric.expression_weight
        features.append(f'Cádiz expression: "{expression}"')

    counts = metrics.syllable_counts
    octosyllabic = bool(counts) and (
        sum(1 for count in counts if count == 8) >= len(counts) * rubric.octosyllabic_share
    )
    if octosyllabic:
        score += rubric.octosyllabic_bonus
        features.append("Traditional octosyllabic meter")

    rhymed = rhyme.rhyme_type in (CONSONANT, ASSONANT)
    if rhymed:
        score += rubric.rhyme_bonus
        features.append(f"Traditional {rhyme.rhyme_type} rhyme")

    score = min(max(round(score, 4), 0.0), 1.0)

    suggestions: List[str] = []
    if score < rubric.vocabulary_hint_below:
        suggestions.append("Include more vocabulary typical of the Cádiz Carnival")
        suggestions.append('Use Cádiz expressions such as "pisha", "mostro" or "salero"')
    if not octosyllabic:
        suggestions.append("Consider octosyllables (8 syllables per verse)")
    if not rhymed:
        suggestions.append("Add consonant or assonant rhyme for more musicality")
    if score < rubric.local_reference_hint_below:
        suggestions.append(
            "References to the sea, La Caleta or everyday life in Cádiz would enrich the text"
        )

    return StyleAnalysis(
        score=score,
        level=style_level(score, rubric),
        features=tuple(features),
        suggestions=tuple(suggestions),
    )
