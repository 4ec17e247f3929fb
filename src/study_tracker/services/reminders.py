from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from ..config import get_settings
from ..core import SessionStore, SettingsStore, session_interval
from ..domain import InvalidFormat, Session

logger = logging.getLogger(__name__)

ReminderCallback = Callable[[Session], None]


class ReminderScheduler:
    """Periodically signals sessions whose end falls in the current minute.

    A reminder fires only in the exact minute the session ends. If the process
    is suspended across that minute the reminder is missed.
    """

    def __init__(
        self,
        sessions: SessionStore,
        settings: SettingsStore,
        *,
        interval: Optional[timedelta] = None,
        clock: Callable[[], datetime] = datetime.now,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self.sessions = sessions
        self.settings = settings
        self.interval = interval or get_settings().reminders.interval
        self._clock = clock
        self._explicit_loop = loop
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._callback: Optional[ReminderCallback] = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self._anchor = 0.0
        self._ticks = 0

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    def register_callback(self, callback: Optional[ReminderCallback]) -> None:
        self._callback = callback

    def start(self) -> None:
        if self._handle is not None:
            self.stop()
        self._loop = self._explicit_loop or asyncio.get_running_loop()
        self._anchor = self._loop.time()
        self._ticks = 0
        logger.debug("Reminder scheduler starting (interval %ss)", self.interval.total_seconds())
        self._schedule_next()
        self.scan()

    def stop(self) -> None:
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        logger.debug("Reminder scheduler stopped")

    def _schedule_next(self) -> None:
        assert self._loop is not None
        # Ticks are pinned to start + n * interval so late callbacks do not drift.
        interval = self.interval.total_seconds()
        elapsed = self._loop.time() - self._anchor
        # Skip slots missed while suspended instead of firing them back to back.
        self._ticks = max(self._ticks + 1, int(elapsed // interval) + 1)
        when = self._anchor + self._ticks * interval
        self._handle = self._loop.call_at(when, self._tick)

    def _tick(self) -> None:
        if self._handle is None:
            return
        self._schedule_next()
        self.scan()

    def scan(self) -> List[Session]:
        """Run one reminder check and return the sessions that were signaled."""

        callback = self._callback
        if callback is None or not self.settings.load().reminders_enabled:
            return []

        now = self._clock()
        today = now.date().isoformat()
        current_minute = now.hour * 60 + now.minute

        fired: List[Session] = []
        for session in self.sessions.list_by_date(today):
            if session.completed:
                continue
            try:
                _, end = session_interval(session)
            except InvalidFormat:
                logger.warning("Skipping session %s with malformed start time %r", session.id, session.start_time)
                continue
            if end != current_minute:
                continue
            logger.info("Session %s (%s) ended; sending reminder", session.id, session.title)
            fired.append(session)
            try:
                callback(session)
            except Exception:  # noqa: BLE001
                logger.exception("Reminder callback failed for session %s", session.id)
        return fired


__all__ = ["ReminderCallback", "ReminderScheduler"]
