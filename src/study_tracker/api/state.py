from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core import SessionStore, SettingsStore, StateStore
from ..services import ReminderScheduler, StudyController


@dataclass(slots=True)
class ApiState:
    state_store: StateStore = field(default_factory=StateStore)
    sessions: SessionStore = field(init=False)
    settings: SettingsStore = field(init=False)
    scheduler: ReminderScheduler = field(init=False)
    controller: StudyController = field(init=False)

    def __post_init__(self) -> None:
        self.bind(self.state_store)

    def bind(self, state_store: Optional[StateStore] = None) -> None:
        """Rebuild the services on top of ``state_store``."""

        self.state_store = state_store or StateStore()
        self.sessions = SessionStore(self.state_store)
        self.settings = SettingsStore(self.state_store)
        self.scheduler = ReminderScheduler(self.sessions, self.settings)
        self.controller = StudyController(self.sessions, self.settings, self.scheduler)


api_state = ApiState()
