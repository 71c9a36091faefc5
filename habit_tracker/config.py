from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import streamlit as st
from streamlit.errors import StreamlitSecretNotFoundError

from habit_tracker.constants import DEFAULT_SAVE_ATTEMPTS, DEFAULT_SAVE_BACKOFF_SECONDS

LOGGER = logging.getLogger(__name__)

DATA_DIR_KEY = "HABIT_TRACKER_DATA_DIR"
TIMEZONE_KEY = "HABIT_TRACKER_TIMEZONE"
SAVE_ATTEMPTS_KEY = "HABIT_TRACKER_SAVE_ATTEMPTS"
DEFAULT_DATA_DIR = Path(".data") / "HabitTracker"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    timezone: ZoneInfo | None = None
    save_attempts: int = DEFAULT_SAVE_ATTEMPTS
    save_backoff_seconds: float = DEFAULT_SAVE_BACKOFF_SECONDS


def _get_secret(name: str, env: Mapping[str, str]) -> str | None:
    try:
        value = st.secrets.get(name)
        if value:
            return str(value).strip()
    except StreamlitSecretNotFoundError:
        value = None
    env_value = env.get(name)
    if env_value:
        return env_value.strip()
    return None


def _parse_timezone(raw: str | None) -> ZoneInfo | None:
    if not raw:
        return None
    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError):
        LOGGER.warning("Unknown timezone %r, falling back to the local timezone.", raw)
        return None


def _parse_attempts(raw: str | None) -> int:
    if not raw:
        return DEFAULT_SAVE_ATTEMPTS
    try:
        return max(1, int(raw))
    except ValueError:
        LOGGER.warning("Invalid save attempt count %r, using %s.", raw, DEFAULT_SAVE_ATTEMPTS)
        return DEFAULT_SAVE_ATTEMPTS


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Read settings from Streamlit secrets first, then environment variables."""

    env_map: Mapping[str, str] = os.environ if env is None else env
    raw_dir = _get_secret(DATA_DIR_KEY, env_map)
    data_dir = Path(raw_dir).expanduser() if raw_dir else DEFAULT_DATA_DIR
    return Settings(
        data_dir=data_dir,
        timezone=_parse_timezone(_get_secret(TIMEZONE_KEY, env_map)),
        save_attempts=_parse_attempts(_get_secret(SAVE_ATTEMPTS_KEY, env_map)),
    )


__all__ = [
    "DATA_DIR_KEY",
    "DEFAULT_DATA_DIR",
    "SAVE_ATTEMPTS_KEY",
    "Settings",
    "TIMEZONE_KEY",
    "load_settings",
]
