"""Service layer wrapping the analysis engine with validation and instrumentation."""

from __future__ import annotations

import html
import re
import threading
from typing import Any, Callable, Dict, Optional, TypeVar

from carnavalito.core import (
    CARNIVAL_FORMS,
    DEFAULT_STYLE_RUBRIC,
    FormTemplate,
    PoemAnalysis,
    QuickAnalysis,
    RhymeSuggestions,
    StyleRubric,
    VerseAdvice,
    advise_verse,
    analyze_poem,
    find_rhymes,
    parse_analysis_level,
    parse_carnival_form,
    quick_analysis,
)

from ..config import Settings
from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from ...utils.telemetry import StructuredTelemetry
from .result_formatter import AnalysisFormatter

_T = TypeVar("_T")

_TAG_PATTERN = re.compile(r"<[^>]*>")
MIN_TARGET_SYLLABLES = 1
MAX_TARGET_SYLLABLES = 30


class InputValidationError(ValueError):
    """Request data rejected before it reaches the analysis engine."""


def sanitize_text(value: str) -> str:
    """Remove markup tags and decode HTML entities."""

    return html.unescape(_TAG_PATTERN.sub("", value))


class PoetryService:
    """Validates requests, runs the engine and records telemetry per call."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        telemetry: Optional[StructuredTelemetry] = None,
        formatter: Optional[AnalysisFormatter] = None,
        rubric: StyleRubric = DEFAULT_STYLE_RUBRIC,
    ) -> None:
        self.settings = settings or Settings()
        self.telemetry = telemetry or StructuredTelemetry()
        self.formatter = formatter or AnalysisFormatter()
        self.rubric = rubric
        self._latest_trace: Dict[str, Any] = {}
        # one trace at a time: start_trace resets the shared collector
        self._trace_lock = threading.Lock()

        self._logger = get_logger(__name__).bind(component="poetry_service")
        self._metric_requests = create_counter(
            "carnavalito_analysis_requests_total",
            "Poetry analysis requests received.",
            label_names=("operation",),
        )
        self._metric_failures = create_counter(
            "carnavalito_analysis_failures_total",
            "Poetry analysis requests that raised an exception.",
            label_names=("operation",),
        )
        self._metric_duration = create_histogram(
            "carnavalito_analysis_seconds",
            "Latency of poetry analysis requests.",
            label_names=("operation",),
        )

        self._logger.info(
            "Poetry service initialised",
            context={
                "max_text_length": self.settings.max_text_length,
                "max_verse_length": self.settings.max_verse_length,
            },
        )

    # Validation ------------------------------------------------------------
    def _clean_input(self, value: Any, field_name: str, max_length: int) -> str:
        if not isinstance(value, str):
            raise InputValidationError(f"{field_name} must be a string")
        cleaned = sanitize_text(value)
        if len(cleaned) > max_length:
            raise InputValidationError(
                f"{field_name} is too long ({len(cleaned)} characters, maximum {max_length})"
            )
        return cleaned

    def _coerce_target(self, value: Any) -> int:
        try:
            target = int(value)
        except (TypeError, ValueError):
            raise InputValidationError("target syllables must be an integer") from None
        if not MIN_TARGET_SYLLABLES <= target <= MAX_TARGET_SYLLABLES:
            raise InputValidationError(
                f"target syllables must be between {MIN_TARGET_SYLLABLES} and {MAX_TARGET_SYLLABLES}"
            )
        return target

    # Instrumentation -------------------------------------------------------
    def _instrumented(
        self,
        operation: str,
        request_context: Dict[str, Any],
        call: Callable[[], _T],
        summarize: Callable[[_T], Dict[str, Any]],
    ) -> _T:
        with self._trace_lock:
            return self._traced_call(operation, request_context, call, summarize)

    def _traced_call(
        self,
        operation: str,
        request_context: Dict[str, Any],
        call: Callable[[], _T],
        summarize: Callable[[_T], Dict[str, Any]],
    ) -> _T:
        telemetry = self.telemetry
        telemetry.start_trace(operation)
        telemetry.increment(f"{operation}.invoked")
        for key, value in request_context.items():
            telemetry.annotate(f"input.{key}", value)

        self._metric_requests.labels(operation=operation).inc()
        self._logger.info("Poetry request received", context={"operation": operation, **request_context})

        with start_span(f"poetry.{operation}", request_context) as span:
            try:
                with self._metric_duration.labels(operation=operation).time():
                    with telemetry.timer(f"{operation}.engine"):
                        result = call()
            except Exception as exc:
                self._metric_failures.labels(operation=operation).inc()
                self._logger.error(
                    "Poetry request failed",
                    context={
                        "operation": operation,
                        "error": str(exc),
                        "error_type": type(exc).__name__,
                        **request_context,
                    },
                )
                record_exception(span, exc)
                telemetry.increment(f"{operation}.failed")
                self._latest_trace = telemetry.snapshot()
                raise

            summary = summarize(result)
            for key, value in summary.items():
                telemetry.annotate(f"result.{key}", value)
            telemetry.increment(f"{operation}.completed")
            self._latest_trace = telemetry.snapshot()
            add_span_attributes(span, {f"result.{key}": value for key, value in summary.items()})
            self._logger.info(
                "Poetry request completed",
                context={"operation": operation, **summary},
            )
            return result

    def get_latest_telemetry(self) -> Dict[str, Any]:
        """Snapshot of the most recent finished request, or the live trace if none finished.

        Requests are traced one at a time, so the snapshot never mixes the
        counters of two concurrent calls.
        """

        if self._latest_trace:
            return dict(self._latest_trace)
        return self.telemetry.snapshot()

    # Public API ------------------------------------------------------------
    def analyze_poem(self, text: Any, analysis_level: Any = "complete") -> PoemAnalysis:
        cleaned = self._clean_input(text, "text", self.settings.max_text_length)
        level = parse_analysis_level(analysis_level)

        def _summary(result: PoemAnalysis) -> Dict[str, Any]:
            summary: Dict[str, Any] = {
                "verses": result.total_verses,
                "pattern": result.metrics.pattern,
                "scheme": result.rhyme.scheme,
            }
            if result.style is not None:
                summary["style_score"] = result.style.score
            return summary

        return self._instrumented(
            "analyze_poem",
            {"text_length": len(cleaned), "analysis_level": level.value},
            lambda: analyze_poem(cleaned, level, rubric=self.rubric),
            _summary,
        )

    def quick_analysis(self, text: Any) -> QuickAnalysis:
        cleaned = self._clean_input(text, "text", self.settings.max_quick_text_length)
        return self._instrumented(
            "quick_analysis",
            {"text_length": len(cleaned)},
            lambda: quick_analysis(cleaned),
            lambda result: {
                "verses": result.verses_count,
                "scheme": result.rhyme_pattern,
                "is_octosyllabic": result.is_octosyllabic,
            },
        )

    def improve_verse(self, verse: Any, target_syllables: Any = 8) -> VerseAdvice:
        cleaned = self._clean_input(verse, "verse", self.settings.max_verse_length)
        if not cleaned.strip():
            raise InputValidationError("verse must not be empty")
        target = self._coerce_target(target_syllables)
        return self._instrumented(
            "improve_verse",
            {"verse_length": len(cleaned), "target_syllables": target},
            lambda: advise_verse(cleaned.strip(), target),
            lambda result: {
                "current_syllables": result.current_syllables,
                "difference": result.difference,
            },
        )

    def lookup_rhymes(self, word: Any, limit: int = 10) -> RhymeSuggestions:
        cleaned = self._clean_input(word, "word", self.settings.max_word_length).strip()
        if not cleaned:
            raise InputValidationError("word must not be empty")
        return self._instrumented(
            "lookup_rhymes",
            {"word": cleaned.lower()},
            lambda: find_rhymes(cleaned, limit=limit),
            lambda result: {
                "consonant": len(result.consonant),
                "assonant": len(result.assonant),
            },
        )

    def carnival_form(self, name: Any) -> FormTemplate:
        return CARNIVAL_FORMS[parse_carnival_form(name)]

    def format_analysis(self, analysis: PoemAnalysis) -> str:
        return self.formatter.format_analysis(analysis)

    def health(self) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "features": {
                "syllable_analysis": True,
                "rhyme_detection": True,
                "carnival_style_analysis": True,
                "poetic_devices": True,
            },
            "carnival_forms": sorted(template.name for template in CARNIVAL_FORMS.values()),
            "limits": {
                "max_text_length": self.settings.max_text_length,
                "max_quick_text_length": self.settings.max_quick_text_length,
                "max_verse_length": self.settings.max_verse_length,
                "max_word_length": self.settings.max_word_length,
            },
        }


__all__ = ["InputValidationError", "PoetryService", "sanitize_text"]
