from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar

import orjson

from .config import default_state, ensure_data_dir, state_file

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StateStore:
    """Whole-record persistence for sessions and settings.

    The record lives in a single JSON file. Every write replaces the file as a
    unit; there are no field-level writes. A missing file is initialized with
    the default state, while an unreadable file is left untouched and the
    defaults are only handed back in memory.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or state_file()

    @property
    def path(self) -> Path:
        return self._path

    def read_state(self) -> Dict[str, Any]:
        if not self._path.exists():
            state = default_state()
            self.write_state(state)
            return state
        try:
            raw = self._path.read_bytes()
            state = orjson.loads(raw)
        except (OSError, orjson.JSONDecodeError):
            logger.exception("Failed to read state from %s; using defaults", self._path)
            return default_state()
        if not isinstance(state, dict) or not isinstance(state.get("sessions", []), list):
            logger.error("State in %s has an unexpected shape; using defaults", self._path)
            return default_state()
        # Backfill missing keys when upgrading.
        for key, value in default_state().items():
            state.setdefault(key, value)
        return state

    def write_state(self, state: Dict[str, Any]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            ensure_data_dir(self._path.parent)
            payload = orjson.dumps(state, option=orjson.OPT_INDENT_2)
            tmp_path.write_bytes(payload + b"\n")
            os.replace(tmp_path, self._path)
        except (OSError, orjson.JSONEncodeError):
            logger.exception("Failed to write state to %s", self._path)

    def clear_state(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Failed to clear state at %s", self._path)
            return
        logger.info("Cleared state at %s", self._path)

    def mutate(self, callback: Callable[[Dict[str, Any]], T]) -> T:
        """Apply ``callback`` to the latest state and persist it.

        Nothing is written when ``callback`` raises.
        """

        state = self.read_state()
        result = callback(state)
        self.write_state(state)
        return result


__all__ = ["StateStore"]
