"""
Local device storage.

A small string key/value store backed by a JSON file. The client persists
exactly two keys here: userRole and onboardingCompleted.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .config import get_settings


logger = logging.getLogger(__name__)

USER_ROLE_KEY = "userRole"
ONBOARDING_COMPLETED_KEY = "onboardingCompleted"


class LocalStorage:
    """JSON-file-backed key/value store with string values."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path else get_settings().storage_path

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            items = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read local storage at {self._path}: {e}")
            return {}
        if not isinstance(items, dict):
            logger.warning(f"Ignoring malformed local storage at {self._path}")
            return {}
        return {str(k): str(v) for k, v in items.items()}

    def _write(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(items, ensure_ascii=False), encoding="utf-8")
