"""Writes the status keys read by the persistence probes."""

from __future__ import annotations

import logging
from typing import Optional

from barangay_console.modules.alertlifecycle.scheduler import Scheduler
from barangay_console.modules.alertlifecycle.storage import KeyValueStore
from barangay_console.modules.alertlifecycle.util import (
    AlertDefaults,
    StorageKeys,
    format_iso_datetime,
)

log = logging.getLogger(__name__)


class StatusRecorder:
    def __init__(self, store: KeyValueStore, clock: Scheduler) -> None:
        self.store = store
        self.clock = clock

    def record_data_refresh(self, success: bool) -> Optional[str]:
        """Stamp ``lastDataUpdate`` on success; a failure leaves the old stamp to age."""
        if not success:
            log.info("Data refresh failed, keeping %s.", StorageKeys.LAST_DATA_UPDATE)
            return self.store.get(StorageKeys.LAST_DATA_UPDATE)
        stamp = format_iso_datetime(self.clock.now())
        self.store.set(StorageKeys.LAST_DATA_UPDATE, stamp)
        return stamp

    def record_backup(self, success: bool) -> str:
        status = AlertDefaults.BACKUP_STATUS_SUCCESS if success else AlertDefaults.BACKUP_STATUS_FAILED
        self.store.set(StorageKeys.LAST_BACKUP_STATUS, status)
        log.info("Backup status recorded as %s.", status)
        return status
