"""Request-facing services built on :mod:`carnavalito.core`."""

from .poetry_service import InputValidationError, PoetryService, sanitize_text
from .result_formatter import AnalysisFormatter

__all__ = ["AnalysisFormatter", "InputValidationError", "PoetryService", "sanitize_text"]
