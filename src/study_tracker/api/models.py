from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Session, Settings


class SessionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    subject: str
    date: str
    start_time: str = Field(alias="startTime")
    duration: int
    completed: bool = Field(default=False)
    created_at: str = Field(default="", alias="createdAt")

    @classmethod
    def from_domain(cls, session: Session) -> "SessionPayload":
        return cls(
            id=session.id,
            title=session.title,
            subject=session.subject,
            date=session.date,
            start_time=session.start_time,
            duration=session.duration,
            completed=session.completed,
            created_at=session.created_at,
        )


class SettingsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reminders_enabled: bool = Field(alias="remindersEnabled")
    dark_mode_enabled: bool = Field(alias="darkModeEnabled")
    motivational_messages_enabled: bool = Field(alias="motivationalMessagesEnabled")
    quick_add_enabled: bool = Field(alias="quickAddEnabled")

    @classmethod
    def from_domain(cls, settings: Settings) -> "SettingsPayload":
        return cls(
            reminders_enabled=settings.reminders_enabled,
            dark_mode_enabled=settings.dark_mode_enabled,
            motivational_messages_enabled=settings.motivational_messages_enabled,
            quick_add_enabled=settings.quick_add_enabled,
        )
