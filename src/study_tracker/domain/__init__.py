"""Domain models for study session scheduling."""

from __future__ import annotations

from .errors import (
    CrossesMidnight,
    InvalidDuration,
    InvalidFormat,
    MissingField,
    Overlap,
    SessionNotFound,
    SessionValidationError,
    StudyTrackerError,
    UnknownField,
    UnknownSetting,
)
from .models import Session, SessionDraft, Settings
from .result import Err, Ok, Result

__all__ = [
    "CrossesMidnight",
    "Err",
    "InvalidDuration",
    "InvalidFormat",
    "MissingField",
    "Ok",
    "Overlap",
    "Result",
    "Session",
    "SessionDraft",
    "SessionNotFound",
    "SessionValidationError",
    "Settings",
    "StudyTrackerError",
    "UnknownField",
    "UnknownSetting",
]
