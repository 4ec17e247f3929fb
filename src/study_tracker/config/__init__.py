"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    APP_AUTHOR,
    APP_NAME,
    AppSettings,
    HttpSettings,
    LoggingSettings,
    ReminderSettings,
    StorageSettings,
    get_settings,
)

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "AppSettings",
    "HttpSettings",
    "LoggingSettings",
    "ReminderSettings",
    "StorageSettings",
    "get_settings",
]
