from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

DEFAULT_SETTINGS: Dict[str, bool] = {
    "remindersEnabled": True,
    "darkModeEnabled": False,
    "motivationalMessagesEnabled": True,
    "quickAddEnabled": True,
}


@dataclass(slots=True)
class SessionDraft:
    """User-supplied fields for a session that has not been stored yet."""

    title: str
    subject: str
    date: str
    start_time: str
    duration: int

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SessionDraft":
        return cls(
            title=str(record.get("title") or ""),
            subject=str(record.get("subject") or ""),
            date=str(record.get("date") or ""),
            start_time=str(record.get("startTime") or record.get("start_time") or ""),
            duration=record.get("duration", 0),
        )


@dataclass(slots=True)
class Session:
    id: str
    title: str
    subject: str
    date: str
    start_time: str
    duration: int
    completed: bool = False
    created_at: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Session":
        return cls(
            id=str(record["id"]),
            title=str(record.get("title") or ""),
            subject=str(record.get("subject") or ""),
            date=str(record.get("date") or ""),
            start_time=str(record.get("startTime") or ""),
            duration=int(record.get("duration") or 0),
            completed=record.get("completed") is True,
            created_at=str(record.get("createdAt") or ""),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "subject": self.subject,
            "date": self.date,
            "startTime": self.start_time,
            "duration": self.duration,
            "completed": self.completed,
            "createdAt": self.created_at,
        }


_SETTINGS_KEYS = {
    "reminders_enabled": "remindersEnabled",
    "dark_mode_enabled": "darkModeEnabled",
    "motivational_messages_enabled": "motivationalMessagesEnabled",
    "quick_add_enabled": "quickAddEnabled",
}


@dataclass(slots=True)
class Settings:
    reminders_enabled: bool = DEFAULT_SETTINGS["remindersEnabled"]
    dark_mode_enabled: bool = DEFAULT_SETTINGS["darkModeEnabled"]
    motivational_messages_enabled: bool = DEFAULT_SETTINGS["motivationalMessagesEnabled"]
    quick_add_enabled: bool = DEFAULT_SETTINGS["quickAddEnabled"]

    @classmethod
    def from_record(cls, record: Any) -> "Settings":
        # Missing or unknown keys fall back to defaults so older files stay readable.
        if not isinstance(record, dict):
            return cls()
        values = {}
        for attribute, key in _SETTINGS_KEYS.items():
            raw = record.get(key, DEFAULT_SETTINGS[key])
            values[attribute] = raw if isinstance(raw, bool) else DEFAULT_SETTINGS[key]
        return cls(**values)

    def to_record(self) -> Dict[str, bool]:
        return {key: getattr(self, attribute) for attribute, key in _SETTINGS_KEYS.items()}

    @classmethod
    def names(cls) -> list[str]:
        return [item.name for item in fields(cls)]
