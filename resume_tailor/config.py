"""Environment driven settings for the resume tailoring helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "RESUME_TAILOR_"

DEFAULT_MAX_INPUT_LENGTH = 50_000
DEFAULT_STRONG_MATCH = 60
DEFAULT_FAIR_MATCH = 35


def _env_str(name: str, *, default: str | None = None) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, *, default: int) -> int:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Runtime configuration shared by the CLI and the Streamlit app."""

    log_level: str = "INFO"
    log_dir: Path | None = None
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    strong_match: int = DEFAULT_STRONG_MATCH
    fair_match: int = DEFAULT_FAIR_MATCH

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        """Build settings from ``RESUME_TAILOR_*`` environment variables.

        A ``.env`` file in the working directory is loaded first unless
        ``dotenv`` is ``False``. Malformed integers fall back to defaults.
        """

        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        log_dir = _env_str("LOG_DIR")
        return cls(
            log_level=(_env_str("LOG_LEVEL", default="INFO") or "INFO").upper(),
            log_dir=Path(log_dir) if log_dir else None,
            max_input_length=_env_int("MAX_INPUT_LENGTH", default=DEFAULT_MAX_INPUT_LENGTH),
            strong_match=_env_int("STRONG_MATCH", default=DEFAULT_STRONG_MATCH),
            fair_match=_env_int("FAIR_MATCH", default=DEFAULT_FAIR_MATCH),
        )
