"""Closed option sets accepted at the service boundary."""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from ..utils.text import strip_accents
from .errors import InvalidOptionError

_E = TypeVar("_E", bound=Enum)


class AnalysisLevel(str, Enum):
    BASIC = "basic"
    COMPLETE = "complete"


class CarnivalForm(str, Enum):
    """Traditional strophe shapes recognised by :func:`match_carnival_forms`."""

    COPLA = "copla"
    SEGUIDILLA = "seguidilla"
    SOLEA = "solea"
    TANGO = "tango"


def _parse(enum_cls: Type[_E], option: str, value: Union[str, _E, None], default: _E) -> _E:
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    normalized = strip_accents(str(value)).strip().lower()
    for member in enum_cls:
        if member.value == normalized:
            return member
    raise InvalidOptionError(option, value, (member.value for member in enum_cls))


def parse_analysis_level(value: Union[str, AnalysisLevel, None]) -> AnalysisLevel:
    """Resolve ``value`` to an :class:`AnalysisLevel`; ``None`` means complete."""

    return _parse(AnalysisLevel, "analysis level", value, AnalysisLevel.COMPLETE)


def parse_carnival_form(value: Union[str, CarnivalForm, None]) -> CarnivalForm:
    return _parse(CarnivalForm, "carnival form", value, CarnivalForm.COPLA)


__all__ = [
    "AnalysisLevel",
    "CarnivalForm",
    "parse_analysis_level",
    "parse_carnival_form",
]
