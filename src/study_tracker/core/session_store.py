from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional
from uuid import uuid4

from ..domain import InvalidFormat, Session, SessionDraft, SessionNotFound, UnknownField
from .state_store import StateStore
from .validation import validate

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "subject", "date", "start_time", "duration", "completed"})


def _sessions_from_state(state: Dict[str, Any]) -> List[Session]:
    sessions: List[Session] = []
    for item in state.get("sessions", []):
        if not isinstance(item, dict):
            logger.warning("Skipping stored session that is not an object: %r", item)
            continue
        try:
            sessions.append(Session.from_record(item))
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed stored session %r", item.get("id"))
    return sessions


def _record_id(record: Any) -> Any:
    return record.get("id") if isinstance(record, dict) else None


class SessionStore:
    """Validated CRUD over the session collection.

    Every mutation reads the latest state, validates against it and writes the
    whole record back. A rejected mutation writes nothing.
    """

    def __init__(
        self,
        state_store: Optional[StateStore] = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.state_store = state_store or StateStore()
        self._clock = clock

    def create(self, draft: SessionDraft) -> Session:
        def _create(state: Dict[str, Any]) -> Session:
            session = Session(
                id=str(uuid4()),
                title=draft.title,
                subject=draft.subject,
                date=draft.date,
                start_time=draft.start_time,
                duration=draft.duration,
                completed=False,
                created_at=self._clock().isoformat(timespec="seconds"),
            )
            validate(session, _sessions_from_state(state))
            state.setdefault("sessions", []).append(session.to_record())
            return session

        session = self.state_store.mutate(_create)
        logger.info("Created session %s on %s at %s", session.id, session.date, session.start_time)
        return session

    def update(self, session_id: str, changes: Mapping[str, Any]) -> Session:
        for name in changes:
            if name not in EDITABLE_FIELDS:
                raise UnknownField(name)
        if "completed" in changes and not isinstance(changes["completed"], bool):
            raise InvalidFormat("completed", changes["completed"], "true/false")

        def _update(state: Dict[str, Any]) -> Session:
            records = state.setdefault("sessions", [])
            for index, record in enumerate(records):
                if _record_id(record) == session_id:
                    break
            else:
                raise SessionNotFound(session_id)
            # Merge first so a partial edit is checked with the stored start time.
            try:
                stored = Session.from_record(record)
            except (TypeError, ValueError):
                # Unreadable records are invisible to reads, so they cannot be edited either.
                raise SessionNotFound(session_id) from None
            candidate = replace(stored, **dict(changes))
            validate(candidate, _sessions_from_state(state), exclude_id=session_id)
            records[index] = candidate.to_record()
            return candidate

        session = self.state_store.mutate(_update)
        logger.info("Updated session %s (%s)", session_id, ", ".join(sorted(changes)))
        return session

    def set_completed(self, session_id: str, completed: bool = True) -> Session:
        return self.update(session_id, {"completed": completed})

    def remove(self, session_id: str) -> None:
        state = self.state_store.read_state()
        records = state.get("sessions", [])
        remaining = [record for record in records if _record_id(record) != session_id]
        if len(remaining) == len(records):
            logger.warning("Session %s not found; nothing removed", session_id)
            return
        state["sessions"] = remaining
        self.state_store.write_state(state)
        logger.info("Removed session %s", session_id)

    def get(self, session_id: str) -> Optional[Session]:
        for session in self.list_all():
            if session.id == session_id:
                return session
        return None

    def list_by_date(self, day: str) -> List[Session]:
        return [session for session in self.list_all() if session.date == day]

    def list_by_date_range(self, start_date: str, end_date: str) -> List[Session]:
        # YYYY-MM-DD strings sort the same way the dates do.
        return [session for session in self.list_all() if start_date <= session.date <= end_date]

    def list_all(self) -> List[Session]:
        return _sessions_from_state(self.state_store.read_state())


__all__ = ["EDITABLE_FIELDS", "SessionStore"]
