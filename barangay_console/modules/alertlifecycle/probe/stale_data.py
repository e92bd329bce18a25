"""Probe for data refresh failures: is the last successful update too old?"""

from __future__ import annotations

from datetime import timedelta

from barangay_console.modules.alertlifecycle.domain import Alert
from barangay_console.modules.alertlifecycle.scheduler import Scheduler
from barangay_console.modules.alertlifecycle.storage import KeyValueStore
from barangay_console.modules.alertlifecycle.util import (
    AlertDefaults,
    AlertKind,
    ProbeError,
    StorageKeys,
    parse_iso_datetime,
)


class StaleDataProbe:
    kind = AlertKind.DATA_REFRESH_FAILED.value
    fail_safe = False

    def __init__(
        self,
        store: KeyValueStore,
        clock: Scheduler,
        threshold: timedelta = timedelta(minutes=AlertDefaults.DATA_STALE_MINUTES),
    ) -> None:
        self.store = store
        self.clock = clock
        self.threshold = threshold

    async def persists(self, alert: Alert) -> bool:
        raw = self.store.get(StorageKeys.LAST_DATA_UPDATE)
        if not raw:
            return False
        try:
            last_update = parse_iso_datetime(raw)
        except ValueError as exc:
            raise ProbeError(f"bad {StorageKeys.LAST_DATA_UPDATE} value {raw!r}") from exc
        return self.clock.now() - last_update > self.threshold
