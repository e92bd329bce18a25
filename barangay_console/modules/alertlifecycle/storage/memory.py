"""In-memory key-value storage."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .base import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)
