"""Persistence, validation, and session storage."""

from .config import DEFAULT_STATE, data_dir, default_state, ensure_data_dir, state_file
from .session_store import EDITABLE_FIELDS, SessionStore
from .settings_store import SettingsStore
from .state_store import StateStore
from .validation import (
    MINUTES_PER_DAY,
    format_minutes,
    parse_day,
    parse_minutes,
    session_interval,
    validate,
)

__all__ = [
    "DEFAULT_STATE",
    "EDITABLE_FIELDS",
    "MINUTES_PER_DAY",
    "SessionStore",
    "SettingsStore",
    "StateStore",
    "data_dir",
    "default_state",
    "ensure_data_dir",
    "format_minutes",
    "parse_day",
    "parse_minutes",
    "session_interval",
    "state_file",
    "validate",
]
