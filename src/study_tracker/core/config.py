from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import get_settings
from ..domain.models import DEFAULT_SETTINGS

DEFAULT_STATE: Dict[str, Any] = {
    "sessions": [],
    "settings": DEFAULT_SETTINGS,
}


def default_state() -> Dict[str, Any]:
    return deepcopy(DEFAULT_STATE)


def data_dir() -> Path:
    return get_settings().storage.data_dir


def state_file() -> Path:
    return get_settings().storage.state_path


def ensure_data_dir(path: Optional[Path] = None) -> None:
    (path or data_dir()).mkdir(parents=True, exist_ok=True)
