from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from study_tracker.core import SessionStore, SettingsStore, StateStore
from study_tracker.domain import SessionDraft


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "study_tracker_data.json"


@pytest.fixture
def state_store(state_path: Path) -> StateStore:
    return StateStore(state_path)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 6, 2, 10, 0))


@pytest.fixture
def sessions(state_store: StateStore, clock: FixedClock) -> SessionStore:
    return SessionStore(state_store, clock=clock)


@pytest.fixture
def settings(state_store: StateStore) -> SettingsStore:
    return SettingsStore(state_store)


def _draft(**overrides) -> SessionDraft:
    values = {
        "title": "Linear algebra",
        "subject": "Math",
        "date": "2025-06-02",
        "start_time": "09:00",
        "duration": 60,
    }
    values.update(overrides)
    return SessionDraft(**values)


@pytest.fixture
def make_draft():
    return _draft
