"""Service layer: reminder polling and the UI-facing controller."""

from __future__ import annotations

from .controller import MOTIVATION_MESSAGES, StudyController, week_start
from .reminders import ReminderCallback, ReminderScheduler

__all__ = [
    "MOTIVATION_MESSAGES",
    "ReminderCallback",
    "ReminderScheduler",
    "StudyController",
    "week_start",
]
