from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from ..domain import Settings, UnknownSetting
from .state_store import StateStore

logger = logging.getLogger(__name__)


class SettingsStore:
    """Reads and writes the settings half of the persisted record."""

    def __init__(self, state_store: Optional[StateStore] = None) -> None:
        self.state_store = state_store or StateStore()

    def load(self) -> Settings:
        return Settings.from_record(self.state_store.read_state().get("settings"))

    def update(self, settings: Settings) -> None:
        def _update(state: Dict[str, Any]) -> None:
            state["settings"] = settings.to_record()

        self.state_store.mutate(_update)

    def toggle(self, name: str, enabled: bool) -> Settings:
        if name not in Settings.names():
            raise UnknownSetting(name)
        settings = replace(self.load(), **{name: bool(enabled)})
        self.update(settings)
        logger.info("Setting %s set to %s", name, enabled)
        return settings


__all__ = ["SettingsStore"]
