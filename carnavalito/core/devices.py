"""Detection of common poetic devices in Spanish verse."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from ..utils.text import fold
from .lexicon import PERSONIFICATION_VERBS, SIMILE_MARKERS

__all__ = ["PoeticDevices", "detect_poetic_devices"]


_MIN_ALLITERATION_LENGTH = 3


@dataclass(frozen=True)
class PoeticDevices:
    alliterations: Tuple[str, ...] = field(default_factory=tuple)
    similes: Tuple[str, ...] = field(default_factory=tuple)
    anaphoras: Tuple[str, ...] = field(default_factory=tuple)
    personifications: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return (
            len(self.alliterations)
            + len(self.similes)
            + len(self.anaphoras)
            + len(self.personifications)
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "alliteration": list(self.alliterations),
            "simile": list(self.similes),
            "anaphora": list(self.anaphoras),
            "personification": list(self.personifications),
            "total": self.total,
        }


def _unique(items) -> Tuple[str, ...]:
    return tuple(OrderedDict.fromkeys(items))


def _alliterations(words: Sequence[str]) -> List[str]:
    pairs = []
    for current, following in zip(words, words[1:]):
        if (
            len(current) >= _MIN_ALLITERATION_LENGTH
            and len(following) >= _MIN_ALLITERATION_LENGTH
            and current[0] == following[0]
        ):
            pairs.append(f"{current} {following}")
    return pairs


def _anaphoras(lines: Sequence[List[str]]) -> List[str]:
    openings: "OrderedDict[str, int]" = OrderedDict()
    for words in lines:
        if len(words) >= 2:
            opening = " ".join(words[:2])
            openings[opening] = openings.get(opening, 0) + 1
    return [opening for opening, count in openings.items() if count > 1]


def detect_poetic_devices(text: str) -> PoeticDevices:
    """Find alliteration, similes, anaphora and personification in ``text``.

    Alliteration pairs adjacent words (three letters or more) within a line
    that share an initial; anaphora is a two-word opening repeated by several
    lines. Everything is matched on the accent-folded lowercase text.
    """

    lines = [fold(line).split() for line in (text or "").splitlines()]
    lines = [words for words in lines if words]
    words = [word for line in lines for word in line]

    return PoeticDevices(
        alliterations=_unique(pair for line in lines for pair in _alliterations(line)),
        similes=_unique(word for word in words if word in SIMILE_MARKERS),
        anaphoras=tuple(_anaphoras(lines)),
        personifications=_unique(word for word in words if word in PERSONIFICATION_VERBS),
    )
