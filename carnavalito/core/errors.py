"""Exceptions raised by the poetic analysis engine."""

from __future__ import annotations


class PoetryAnalysisError(Exception):
    """Base class for analysis errors a caller can recover from."""


class EmptyInputError(PoetryAnalysisError, ValueError):
    """The text contains no usable verses after segmentation."""

    def __init__(self, message: str = "No valid verses found in the text") -> None:
        super().__init__(message)


class InvalidVerseError(PoetryAnalysisError, ValueError):
    """A verse too short to derive an ending.

    The engine does not raise this: short endings degrade to empty rhyme
    patterns. It is kept so callers that want strict validation can use it.
    """


class InvalidOptionError(PoetryAnalysisError, ValueError):
    """An option value outside its closed set of recognised names."""

    def __init__(self, option: str, value: object, allowed) -> None:
        self.option = option
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unknown {option} {value!r}; expected one of: {', '.join(self.allowed)}"
        )


__all__ = [
    "PoetryAnalysisError",
    "EmptyInputError",
    "InvalidVerseError",
    "InvalidOptionError",
]
