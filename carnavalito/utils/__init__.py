"""Utility helpers shared across the :mod:`carnavalito` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .telemetry import StructuredTelemetry, TelemetryLogger
from .text import fold, letters_only, strip_accents

__all__ = [
    "configure_logging",
    "StructuredLoggerAdapter",
    "StructuredTelemetry",
    "TelemetryLogger",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "fold",
    "get_logger",
    "letters_only",
    "record_exception",
    "start_span",
    "strip_accents",
]
