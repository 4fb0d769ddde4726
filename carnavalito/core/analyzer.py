"""End-to-end poem analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .devices import PoeticDevices, detect_poetic_devices
from .improvements import Improvement, suggest_improvements
from .meter import MetricAnalysis, analyze_metrics, match_carnival_forms
from .options import AnalysisLevel, parse_analysis_level
from .rhyme import RhymeAnalysis, analyze_rhyme
from .style import DEFAULT_STYLE_RUBRIC, StyleAnalysis, StyleRubric, score_carnival_style
from .syllables import count_syllables
from .verses import build_verses, segment_verses

__all__ = ["PoemAnalysis", "QuickAnalysis", "analyze_poem", "quick_analysis"]


OCTOSYLLABIC_RANGE = range(7, 10)


@dataclass(frozen=True)
class PoemAnalysis:
    """Structured result of :func:`analyze_poem`.

    ``style``, ``devices``, ``improvements`` and ``forms`` are only filled
    for :attr:`AnalysisLevel.COMPLETE`.
    """

    level: AnalysisLevel
    metrics: MetricAnalysis
    rhyme: RhymeAnalysis
    style: Optional[StyleAnalysis] = None
    devices: Optional[PoeticDevices] = None
    improvements: Tuple[Improvement, ...] = field(default_factory=tuple)
    forms: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_verses(self) -> int:
        return len(self.metrics.verses)

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "analysis_level": self.level.value,
            "total_verses": self.total_verses,
            "verses": [verse.as_dict() for verse in self.metrics.verses],
            "metrics": self.metrics.as_dict(),
            "rhyme": self.rhyme.as_dict(),
        }
        if self.level is AnalysisLevel.COMPLETE:
            payload["carnival_style"] = self.style.as_dict() if self.style else None
            payload["poetic_devices"] = self.devices.as_dict() if self.devices else None
            payload["improvements"] = [item.as_dict() for item in self.improvements]
            payload["forms"] = list(self.forms)
        return payload


def analyze_poem(
    text: str,
    level: Union[str, AnalysisLevel, None] = AnalysisLevel.COMPLETE,
    *,
    rubric: StyleRubric = DEFAULT_STYLE_RUBRIC,
) -> PoemAnalysis:
    """Segment ``text`` and run the meter, rhyme and (optionally) style analyses.

    Raises :class:`~carnavalito.core.errors.EmptyInputError` when the text has
    no verses and :class:`~carnavalito.core.errors.InvalidOptionError` for an
    unknown ``level``.
    """

    resolved_level = parse_analysis_level(level)
    lines = segment_verses(text)
    verses = build_verses(lines)
    metrics = analyze_metrics(verses)
    rhyme = analyze_rhyme(lines, endings=[verse.ending for verse in verses])

    if resolved_level is AnalysisLevel.BASIC:
        return PoemAnalysis(level=resolved_level, metrics=metrics, rhyme=rhyme)

    return PoemAnalysis(
        level=resolved_level,
        metrics=metrics,
        rhyme=rhyme,
        style=score_carnival_style(lines, metrics, rhyme, rubric),
        devices=detect_poetic_devices("\n".join(lines)),
        improvements=tuple(suggest_improvements(metrics, rhyme)),
        forms=tuple(match_carnival_forms(metrics.syllable_counts, rhyme.scheme)),
    )


@dataclass(frozen=True)
class QuickAnalysis:
    syllables: Tuple[int, ...]
    rhyme_pattern: str
    is_octosyllabic: bool

    @property
    def verses_count(self) -> int:
        return len(self.syllables)

    @property
    def message(self) -> str:
        if self.is_octosyllabic:
            return "Perfect for the Carnival: traditional octosyllabic meter."
        return "Free meter. Consider octosyllables for a carnival style."

    def as_dict(self) -> Dict[str, Any]:
        return {
            "verses_count": self.verses_count,
            "syllables": list(self.syllables),
            "rhyme_pattern": self.rhyme_pattern,
            "is_octosyllabic": self.is_octosyllabic,
            "message": self.message,
        }


def quick_analysis(text: str) -> QuickAnalysis:
    """Syllables per verse and rhyme scheme only; every verse within 7-9 counts as octosyllabic."""

    lines: List[str] = segment_verses(text)
    syllables = tuple(count_syllables(line) for line in lines)
    return QuickAnalysis(
        syllables=syllables,
        rhyme_pattern=analyze_rhyme(lines).scheme,
        is_octosyllabic=all(count in OCTOSYLLABIC_RANGE for count in syllables),
    )
