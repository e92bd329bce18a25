"""Loading and saving :class:`AlertSettings` through a key-value store."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from barangay_console.modules.alertlifecycle.domain import AlertSettings
from barangay_console.modules.alertlifecycle.util import SettingsLoadException, StorageKeys

from .base import KeyValueStore

log = logging.getLogger(__name__)


class AlertSettingsStore:
    """Settings overlay: defaults, then backup settings' alerts, then alert settings."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def load(self) -> AlertSettings:
        merged = AlertSettings()
        for key, section in (
            (StorageKeys.BACKUP_SETTINGS, StorageKeys.BACKUP_SETTINGS_ALERTS),
            (StorageKeys.ALERT_SETTINGS, None),
        ):
            try:
                overlay = self._read_blob(key, section)
            except SettingsLoadException as exc:
                log.warning("Skipping persisted %s: %s", key, exc)
                continue
            if not overlay:
                continue
            try:
                parsed = AlertSettings.model_validate(overlay)
            except ValidationError as exc:
                log.warning("Skipping persisted %s: %s", key, exc.errors())
                continue
            # Only keys present in the blob override earlier layers.
            updates = {name: getattr(parsed, name) for name in parsed.model_fields_set}
            merged = merged.model_copy(update=updates)
        return merged

    def save(self, settings: AlertSettings) -> None:
        try:
            self.store.set(StorageKeys.ALERT_SETTINGS, json.dumps(settings.to_storage()))
        except OSError as exc:
            log.error("Failed to persist alert settings: %s", exc)

    def _read_blob(self, key: str, section: Optional[str]) -> Optional[Dict[str, Any]]:
        try:
            raw = self.store.get(key)
        except OSError as exc:
            raise SettingsLoadException(f"storage read failed: {exc}") from exc
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as exc:
            raise SettingsLoadException(f"not valid JSON: {exc}") from exc
        if section is not None and isinstance(data, dict):
            data = data.get(section)
            if data is None:
                return None
        if not isinstance(data, dict):
            raise SettingsLoadException("expected a JSON object")
        return data

