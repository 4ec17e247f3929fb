from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Callable, List, Mapping, Optional

from ..core import SessionStore, SettingsStore, parse_day
from ..domain import Err, Ok, Result, Session, SessionDraft, Settings, StudyTrackerError
from .reminders import ReminderScheduler

logger = logging.getLogger(__name__)

MOTIVATION_MESSAGES = (
    "Nice work, you're building great habits.",
    "Session done! Future you says thank you.",
    "You showed up today. That matters a lot.",
    "Another block finished. Keep the momentum going.",
)


def week_start(day: date) -> date:
    """Sunday of the week containing ``day``."""

    return day - timedelta(days=(day.weekday() + 1) % 7)


@dataclass
class StudyController:
    """Boundary between a user interface and the session engine.

    Failures come back as ``Err`` values carrying the message to display.
    """

    sessions: SessionStore
    settings: SettingsStore
    scheduler: Optional[ReminderScheduler] = None
    clock: Callable[[], datetime] = datetime.now
    rng: random.Random = field(default_factory=random.Random)
    pending_reminder: Optional[Session] = field(default=None, init=False)

    # Sessions ------------------------------------------------------------
    def create_session(self, fields: SessionDraft | Mapping[str, Any]) -> Result[Session]:
        draft = fields if isinstance(fields, SessionDraft) else SessionDraft.from_record(dict(fields))
        try:
            return Ok(self.sessions.create(draft))
        except StudyTrackerError as exc:
            logger.info("Rejected new session: %s", exc)
            return Err(exc)

    def edit_session(self, session_id: str, changes: Mapping[str, Any]) -> Result[Session]:
        try:
            return Ok(self.sessions.update(session_id, changes))
        except StudyTrackerError as exc:
            logger.info("Rejected edit of session %s: %s", session_id, exc)
            return Err(exc)

    def delete_session(self, session_id: str) -> None:
        self.sessions.remove(session_id)

    def mark_session_complete(self, session_id: str, completed: bool = True) -> Result[Session]:
        try:
            return Ok(self.sessions.set_completed(session_id, completed))
        except StudyTrackerError as exc:
            return Err(exc)

    def today(self) -> str:
        return self.clock().date().isoformat()

    def load_sessions_for_today(self) -> List[Session]:
        return sorted(self.sessions.list_by_date(self.today()), key=lambda item: item.start_time)

    def load_sessions_for_week(self, start_date: Optional[str] = None) -> List[Session]:
        start = parse_day(start_date) if start_date else week_start(self.clock().date())
        end = start + timedelta(days=6)
        sessions = self.sessions.list_by_date_range(start.isoformat(), end.isoformat())
        return sorted(sessions, key=lambda item: (item.date, item.start_time))

    # Settings ------------------------------------------------------------
    def load_settings(self) -> Settings:
        return self.settings.load()

    def toggle_setting(self, name: str, enabled: bool) -> Result[Settings]:
        try:
            return Ok(self.settings.toggle(name, enabled))
        except StudyTrackerError as exc:
            return Err(exc)

    # Reminders -----------------------------------------------------------
    def attach_reminders(self) -> None:
        if self.scheduler is None:
            return
        self.scheduler.register_callback(self._on_reminder)
        self.scheduler.start()

    def detach_reminders(self) -> None:
        if self.scheduler is None:
            return
        self.scheduler.stop()
        self.scheduler.register_callback(None)

    def _on_reminder(self, session: Session) -> None:
        self.pending_reminder = session

    def confirm_reminder(self) -> Optional[str]:
        """Mark the pending session complete and return a motivational message, if enabled."""

        session = self.pending_reminder
        self.pending_reminder = None
        if session is None:
            return None
        result = self.mark_session_complete(session.id, True)
        if isinstance(result, Err):
            logger.warning("Could not complete session %s: %s", session.id, result.message)
            return None
        if self.settings.load().motivational_messages_enabled:
            return self.rng.choice(MOTIVATION_MESSAGES)
        return None

    def dismiss_reminder(self) -> None:
        self.pending_reminder = None


__all__ = ["MOTIVATION_MESSAGES", "StudyController", "week_start"]
