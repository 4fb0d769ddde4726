"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _env_flag(environ: Mapping[str, str], key: str) -> bool:
    return str(environ.get(key, "")).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Input limits and server options for the service and the UI."""

    max_text_length: int = 5000
    max_quick_text_length: int = 2000
    max_verse_length: int = 200
    max_word_length: int = 50
    server_name: str = "0.0.0.0"
    server_port: int = 7860
    share: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            max_text_length=_env_int(env, "CARNAVALITO_MAX_TEXT_LENGTH", defaults.max_text_length),
            max_quick_text_length=_env_int(
                env, "CARNAVALITO_MAX_QUICK_TEXT_LENGTH", defaults.max_quick_text_length
            ),
            max_verse_length=_env_int(env, "CARNAVALITO_MAX_VERSE_LENGTH", defaults.max_verse_length),
            max_word_length=_env_int(env, "CARNAVALITO_MAX_WORD_LENGTH", defaults.max_word_length),
            server_name=env.get("CARNAVALITO_SERVER_NAME") or defaults.server_name,
            server_port=_env_int(env, "CARNAVALITO_SERVER_PORT", defaults.server_port),
            share=_env_flag(env, "CARNAVALITO_SHARE"),
            log_level=env.get("CARNAVALITO_LOG_LEVEL") or None,
        )


__all__ = ["Settings"]
