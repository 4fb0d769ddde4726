import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from carnavalito.app.config import Settings
from carnavalito.app.services.poetry_service import PoetryService
from carnavalito.utils.telemetry import StructuredTelemetry


# Four octosyllables rhyming ABAB (caleta/completa, cantar/mar).
COPLA = (
    "Cádiz tiene una caleta\n"
    "donde la gente va a cantar\n"
    "mi comparsa la completa\n"
    "todas las comparsas del mar"
)


@pytest.fixture
def copla() -> str:
    return COPLA


@pytest.fixture
def service() -> PoetryService:
    """Service with its own telemetry collector and default limits."""

    return PoetryService(settings=Settings(), telemetry=StructuredTelemetry())
