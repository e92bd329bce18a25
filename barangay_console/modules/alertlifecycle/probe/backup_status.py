"""Probe for backup failures."""

from __future__ import annotations

from barangay_console.modules.alertlifecycle.domain import Alert
from barangay_console.modules.alertlifecycle.storage import KeyValueStore
from barangay_console.modules.alertlifecycle.util import AlertDefaults, AlertKind, StorageKeys


class BackupStatusProbe:
    kind = AlertKind.BACKUP_FAILED.value
    fail_safe = False

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    async def persists(self, alert: Alert) -> bool:
        return self.store.get(StorageKeys.LAST_BACKUP_STATUS) == AlertDefaults.BACKUP_STATUS_FAILED
