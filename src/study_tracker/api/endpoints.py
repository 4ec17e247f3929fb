from __future__ import annotations

from typing import Any, Dict, Optional

from ..domain import Err, Result, SessionDraft
from .registry import register_api
from .serializers import serialize_session, serialize_sessions, serialize_settings
from .state import api_state

_FIELD_ALIASES = {"startTime": "start_time", "createdAt": "created_at"}


def _unwrap(result: Result[Any]) -> Any:
    if isinstance(result, Err):
        raise result.error
    return result.value


def _normalize_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    return {_FIELD_ALIASES.get(key, key): value for key, value in changes.items()}


@register_api(
    "create_session",
    description="Schedule a new study session after checking it against the day's other sessions.",
    category="sessions",
    tags=("create",),
)
def create_session(title: str, subject: str, date: str, start_time: str, duration: int) -> Dict[str, Any]:
    draft = SessionDraft(title=title, subject=subject, date=date, start_time=start_time, duration=duration)
    session = _unwrap(api_state.controller.create_session(draft))
    return {"session": serialize_session(session)}


@register_api(
    "edit_session",
    description="Apply a partial edit to a session; the merged session is re-validated.",
    category="sessions",
    tags=("update",),
)
def edit_session(session_id: str, changes: dict) -> Dict[str, Any]:
    session = _unwrap(api_state.controller.edit_session(session_id, _normalize_changes(changes)))
    return {"session": serialize_session(session)}


@register_api(
    "complete_session",
    description="Set the completion flag of a session.",
    category="sessions",
    tags=("update", "complete"),
)
def complete_session(session_id: str, completed: bool = True) -> Dict[str, Any]:
    session = _unwrap(api_state.controller.mark_session_complete(session_id, completed))
    return {"session": serialize_session(session)}


@register_api(
    "delete_session",
    description="Delete a session by identifier. Unknown identifiers are ignored.",
    category="sessions",
    tags=("delete",),
)
def delete_session(session_id: str) -> Dict[str, Any]:
    api_state.controller.delete_session(session_id)
    return {"session_id": session_id}


@register_api(
    "sessions_for_day",
    description="List sessions scheduled on a day (YYYY-MM-DD), defaulting to today, ordered by start time.",
    category="sessions",
    tags=("read", "day"),
)
def sessions_for_day(day: Optional[str] = None) -> Dict[str, Any]:
    controller = api_state.controller
    target = day or controller.today()
    sessions = sorted(api_state.sessions.list_by_date(target), key=lambda item: item.start_time)
    return {"date": target, "sessions": serialize_sessions(sessions)}


@register_api(
    "sessions_for_week",
    description="List the seven days of sessions starting at start_date, or the current Sunday-based week.",
    category="sessions",
    tags=("read", "week"),
)
def sessions_for_week(start_date: Optional[str] = None) -> Dict[str, Any]:
    return {"sessions": serialize_sessions(api_state.controller.load_sessions_for_week(start_date))}


@register_api(
    "sessions_between",
    description="List sessions between two dates inclusive.",
    category="sessions",
    tags=("read", "range"),
)
def sessions_between(start_date: str, end_date: str) -> Dict[str, Any]:
    sessions = api_state.sessions.list_by_date_range(start_date, end_date)
    return {"start": start_date, "end": end_date, "sessions": serialize_sessions(sessions)}


@register_api(
    "all_sessions",
    description="List every stored session in insertion order.",
    category="sessions",
    tags=("read",),
)
def all_sessions() -> Dict[str, Any]:
    return {"sessions": serialize_sessions(api_state.sessions.list_all())}


@register_api(
    "get_settings",
    description="Return the current settings toggles.",
    category="settings",
    tags=("read",),
)
def get_settings() -> Dict[str, Any]:
    return {"settings": serialize_settings(api_state.controller.load_settings())}


@register_api(
    "toggle_setting",
    description="Turn a setting on or off (reminders_enabled, dark_mode_enabled, "
    "motivational_messages_enabled, quick_add_enabled).",
    category="settings",
    tags=("update",),
)
def toggle_setting(name: str, enabled: bool) -> Dict[str, Any]:
    settings = _unwrap(api_state.controller.toggle_setting(name, enabled))
    return {"settings": serialize_settings(settings)}


@register_api(
    "pending_reminder",
    description="Return the session currently awaiting confirmation, if any.",
    category="reminders",
    tags=("read",),
)
def pending_reminder() -> Dict[str, Any]:
    session = api_state.controller.pending_reminder
    return {"session": serialize_session(session) if session else None}


@register_api(
    "confirm_reminder",
    description="Mark the pending reminder's session complete.",
    category="reminders",
    tags=("update",),
)
def confirm_reminder() -> Dict[str, Any]:
    return {"message": api_state.controller.confirm_reminder()}


@register_api(
    "dismiss_reminder",
    description="Dismiss the pending reminder without completing the session.",
    category="reminders",
    tags=("update",),
)
def dismiss_reminder() -> Dict[str, Any]:
    api_state.controller.dismiss_reminder()
    return {"dismissed": True}


@register_api(
    "reset_state",
    description="Delete all stored sessions and settings.",
    category="storage",
    tags=("delete",),
)
def reset_state() -> Dict[str, Any]:
    api_state.state_store.clear_state()
    return {"cleared": True}
