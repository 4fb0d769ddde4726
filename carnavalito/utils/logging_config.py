"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "CARNAVALITO_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        resolved = logging.getLevelName(normalized)
        return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Install the root handler used by the service and the Gradio front-end.

    The explicit ``level`` wins over ``CARNAVALITO_LOG_LEVEL``; unknown names
    fall back to ``INFO``. Returns the level that was applied so callers can
    report it.
    """

    global _CONFIGURED

    resolved_level = _resolve_level(
        level if level is not None else os.environ.get(LOG_LEVEL_ENV)
    )
    if _CONFIGURED and not force:
        return logging.getLogger("carnavalito").level

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("carnavalito").setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["LOG_LEVEL_ENV", "configure_logging"]
