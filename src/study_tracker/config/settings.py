from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir, user_log_dir

load_dotenv()

APP_NAME = "Study Tracker"
APP_AUTHOR = "StudyTracker"


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    state_file: str

    @property
    def state_path(self) -> Path:
        return self.data_dir / self.state_file


@dataclass(frozen=True)
class ReminderSettings:
    interval: timedelta


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class HttpSettings:
    host: str
    port: int


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    reminders: ReminderSettings
    logging: LoggingSettings
    http: HttpSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _path_from_env(name: str, default: str) -> Path:
    raw: Optional[str] = os.getenv(name)
    return Path(raw) if raw else Path(default)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    storage = StorageSettings(
        data_dir=_path_from_env("STUDY_TRACKER_DATA_DIR", user_data_dir(APP_NAME, APP_AUTHOR)),
        state_file=os.getenv("STUDY_TRACKER_STATE_FILE", "study_tracker_data.json"),
    )

    reminders = ReminderSettings(
        interval=timedelta(seconds=_int_from_env("STUDY_TRACKER_REMINDER_SECONDS", 60)),
    )

    logging_settings = LoggingSettings(
        level=os.getenv("STUDY_TRACKER_LOG_LEVEL", "INFO").upper(),
        directory=_path_from_env("STUDY_TRACKER_LOG_DIR", user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    http = HttpSettings(
        host=os.getenv("STUDY_TRACKER_HOST", "127.0.0.1"),
        port=_int_from_env("STUDY_TRACKER_PORT", 8000),
    )

    return AppSettings(storage=storage, reminders=reminders, logging=logging_settings, http=http)
