"""Key-value storage persisted as a single JSON document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .base import KeyValueStore

log = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Reads the file once, rewrites it on every change.

    A missing or unreadable file starts the store empty; the next write
    replaces it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._values: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring storage file %s: expected an object", self.path)
            return {}
        return {str(key): value if isinstance(value, str) else json.dumps(value) for key, value in data.items()}

    def _flush(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(self._values, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            log.error("Failed to persist storage file %s: %s", self.path, exc)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            self._flush()
