"""Static vocabulary, rhyme and strophe tables for Cádiz carnival poetry.

Everything here is built once at import time and exposed read-only: tuples,
frozensets and :class:`types.MappingProxyType` views.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..utils.text import fold
from .options import CarnivalForm


@dataclass(frozen=True)
class FormTemplate:
    """Shape of a traditional strophe: verse count, meter and rhyme scheme."""

    name: str
    verses: int
    syllables: Tuple[int, ...]
    rhyme: str
    description: str

    def as_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "verses": self.verses,
            "syllables": list(self.syllables),
            "rhyme": self.rhyme,
            "description": self.description,
        }


def _dedupe_folded(entries: Tuple[str, ...]) -> Mapping[str, str]:
    """Map folded spelling -> first display spelling, keeping table order."""

    table: Dict[str, str] = {}
    for entry in entries:
        table.setdefault(fold(entry), entry)
    return MappingProxyType(table)


CARNIVAL_VOCABULARY: Tuple[str, ...] = (
    "carnaval",
    "chirigota",
    "comparsa",
    "coro",
    "cuarteto",
    "falla",
    "coac",
    "cadiz",
    "cádiz",
    "gaditano",
    "tacita",
    "caleta",
    "mar",
    "sal",
    "barrio",
    "pueblo",
)

GADITAN_EXPRESSIONS: Tuple[str, ...] = (
    "pisha",
    "mostro",
    "zambombazo",
    "salero",
    "arte",
    "olé",
    "viva",
    "ay mare",
    "qué rico",
)

# folded form -> display form; "cadiz" and "cádiz" collapse into one entry
CARNIVAL_TERMS = _dedupe_folded(CARNIVAL_VOCABULARY)
GADITAN_TERMS = _dedupe_folded(GADITAN_EXPRESSIONS)

# Words that mark a verse as carnival themed in verse advice.
CARNIVAL_HINTS = frozenset({"carnaval", "gaditano", "cadiz", "fiesta", "alegria"})

SIMILE_MARKERS = frozenset({"como", "cual", "semejante", "parecido"})
PERSONIFICATION_VERBS = frozenset({"susurra", "llora", "rie", "baila", "canta"})


def _build_consonant_rhymes() -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType(
        {
            "ada": ("nada", "Granada", "jornada", "alborada", "mirada"),
            "ida": ("vida", "querida", "salida", "partida", "herida"),
            "ente": ("gente", "presente", "caliente", "ambiente", "corriente"),
            "ía": ("alegría", "compañía", "fantasía", "rebeldía", "poesía"),
            "or": ("amor", "dolor", "honor", "candor", "esplendor"),
            "ano": ("gaditano", "hermano", "verano", "temprano", "mano"),
        }
    )


def _build_assonant_rhymes() -> Mapping[str, Tuple[str, ...]]:
    # keyed by the last two vowels of the accent-folded word
    return MappingProxyType(
        {
            "aa": ("carnaval", "cantar", "alma", "plata", "mañana"),
            "ao": ("gaditano", "verano", "hermano", "pasado", "cansado"),
            "ea": ("caleta", "bandera", "primavera", "pena", "arena"),
            "eo": ("pueblo", "cielo", "vuelo", "desvelo", "anhelo"),
            "ia": ("vida", "herida", "querida", "partida", "comida"),
            "oa": ("hora", "aurora", "señora", "demora", "ahora"),
        }
    )


CONSONANT_RHYMES = _build_consonant_rhymes()
ASSONANT_RHYMES = _build_assonant_rhymes()


def _build_carnival_forms() -> Mapping[CarnivalForm, FormTemplate]:
    return MappingProxyType(
        {
            CarnivalForm.COPLA: FormTemplate(
                name="copla",
                verses=4,
                syllables=(8, 8, 8, 8),
                rhyme="ABAB",
                description="Octosyllabic quatrain with alternating rhyme",
            ),
            CarnivalForm.SEGUIDILLA: FormTemplate(
                name="seguidilla",
                verses=4,
                syllables=(7, 5, 7, 5),
                rhyme="ABCB",
                description="Gypsy seguidilla typical of flamenco",
            ),
            CarnivalForm.SOLEA: FormTemplate(
                name="solea",
                verses=3,
                syllables=(8, 8, 8),
                rhyme="ABA",
                description="Octosyllabic tercet of the soleá",
            ),
            CarnivalForm.TANGO: FormTemplate(
                name="tango",
                verses=4,
                syllables=(8, 8, 8, 8),
                rhyme="ABCB",
                description="Quatrain rhyming on the even verses",
            ),
        }
    )


CARNIVAL_FORMS = _build_carnival_forms()


__all__ = [
    "FormTemplate",
    "CARNIVAL_VOCABULARY",
    "GADITAN_EXPRESSIONS",
    "CARNIVAL_TERMS",
    "GADITAN_TERMS",
    "CARNIVAL_HINTS",
    "SIMILE_MARKERS",
    "PERSONIFICATION_VERBS",
    "CONSONANT_RHYMES",
    "ASSONANT_RHYMES",
    "CARNIVAL_FORMS",
]
