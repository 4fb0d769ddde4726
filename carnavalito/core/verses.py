"""Verse segmentation and per-verse records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from .errors import EmptyInputError
from .rhyme import VerseEnding, extract_ending
from .syllables import analyze_stress, count_syllables

__all__ = ["Verse", "normalize_text", "segment_verses", "build_verses"]


_QUOTES_PATTERN = re.compile(r"[“”«»‘’]")
_DASHES_PATTERN = re.compile(r"[–—]")
_HORIZONTAL_SPACE_PATTERN = re.compile(r"[^\S\n]+")
_NEWLINES_PATTERN = re.compile(r"\n+")
_SEPARATOR_PATTERN = re.compile(r"^[\d\s\-_=]+$")


@dataclass(frozen=True)
class Verse:
    """One line of a poem with its derived metrical and rhyme data."""

    position: int
    text: str
    syllables: int
    stress: str
    ending: VerseEnding

    @classmethod
    def from_text(cls, position: int, text: str) -> "Verse":
        return cls(
            position=position,
            text=text,
            syllables=count_syllables(text),
            stress=analyze_stress(text),
            ending=extract_ending(text),
        )

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    def as_dict(self) -> Dict[str, Any]:
        return {
            "number": self.position,
            "text": self.text,
            "syllables": self.syllables,
            "stress": self.stress,
            "words": self.word_count,
            "ending": self.ending.consonant,
        }


def normalize_text(text: str) -> str:
    """Unify typographic quotes and dashes and collapse spaces within lines."""

    normalized = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    normalized = _QUOTES_PATTERN.sub('"', normalized)
    normalized = _DASHES_PATTERN.sub("-", normalized)
    return _HORIZONTAL_SPACE_PATTERN.sub(" ", normalized)


def segment_verses(text: str) -> List[str]:
    """Split ``text`` into verses, dropping blank and separator lines.

    Raises :class:`EmptyInputError` when nothing usable remains.
    """

    lines = (line.strip() for line in _NEWLINES_PATTERN.split(normalize_text(text)))
    verses = [line for line in lines if line and not _SEPARATOR_PATTERN.match(line)]
    if not verses:
        raise EmptyInputError()
    return verses


def build_verses(lines: Iterable[str]) -> List[Verse]:
    return [Verse.from_text(index, line) for index, line in enumerate(lines, start=1)]
