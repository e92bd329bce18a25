"""Key-value storage contract."""

from __future__ import annotations

from typing import Optional


class KeyValueStore:
    """String-to-string storage local to one console session."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError
