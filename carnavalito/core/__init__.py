"""Poetic meter and rhyme analysis for Cádiz carnival coplas."""

from .analyzer import PoemAnalysis, QuickAnalysis, analyze_poem, quick_analysis
from .devices import PoeticDevices, detect_poetic_devices
from .errors import (
    EmptyInputError,
    InvalidOptionError,
    InvalidVerseError,
    PoetryAnalysisError,
)
from .improvements import Improvement, VerseAdvice, advise_verse, suggest_improvements
from .lexicon import CARNIVAL_FORMS, FormTemplate
from .meter import (
    MeterClassification,
    MetricAnalysis,
    analyze_metrics,
    classify_meter,
    match_carnival_forms,
)
from .options import AnalysisLevel, CarnivalForm, parse_analysis_level, parse_carnival_form
from .rhyme import (
    RhymeAnalysis,
    RhymeSuggestions,
    VerseEnding,
    analyze_rhyme,
    extract_ending,
    find_rhymes,
)
from .style import DEFAULT_STYLE_RUBRIC, StyleAnalysis, StyleRubric, score_carnival_style
from .syllables import analyze_stress, count_syllables
from .verses import Verse, build_verses, segment_verses

__all__ = [
    "AnalysisLevel",
    "CARNIVAL_FORMS",
    "CarnivalForm",
    "DEFAULT_STYLE_RUBRIC",
    "EmptyInputError",
    "FormTemplate",
    "Improvement",
    "InvalidOptionError",
    "InvalidVerseError",
    "MeterClassification",
    "MetricAnalysis",
    "PoemAnalysis",
    "PoeticDevices",
    "PoetryAnalysisError",
    "QuickAnalysis",
    "RhymeAnalysis",
    "RhymeSuggestions",
    "StyleAnalysis",
    "StyleRubric",
    "Verse",
    "VerseAdvice",
    "VerseEnding",
    "advise_verse",
    "analyze_metrics",
    "analyze_poem",
    "analyze_rhyme",
    "analyze_stress",
    "build_verses",
    "classify_meter",
    "count_syllables",
    "detect_poetic_devices",
    "extract_ending",
    "find_rhymes",
    "match_carnival_forms",
    "parse_analysis_level",
    "parse_carnival_form",
    "quick_analysis",
    "score_carnival_style",
    "segment_verses",
    "suggest_improvements",
]
