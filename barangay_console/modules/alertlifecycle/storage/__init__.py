"""Storage exports."""

from .base import KeyValueStore
from .json_file import JsonFileKeyValueStore
from .memory import InMemoryKeyValueStore
from .settings_store import AlertSettingsStore

__all__ = ["KeyValueStore", "JsonFileKeyValueStore", "InMemoryKeyValueStore", "AlertSettingsStore"]
