from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import Session, Settings
from .models import SessionPayload, SettingsPayload


def serialize_session(session: Session) -> Dict[str, Any]:
    return SessionPayload.from_domain(session).model_dump(by_alias=True)


def serialize_sessions(sessions: Iterable[Session]) -> List[Dict[str, Any]]:
    return [serialize_session(session) for session in sessions]


def serialize_settings(settings: Settings) -> Dict[str, Any]:
    return SettingsPayload.from_domain(settings).model_dump(by_alias=True)
