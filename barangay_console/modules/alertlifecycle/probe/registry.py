"""Probe lookup by alert kind."""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, Iterable, Optional

import httpx

from barangay_console.modules.alertlifecycle.scheduler import Scheduler
from barangay_console.modules.alertlifecycle.storage import KeyValueStore
from barangay_console.modules.alertlifecycle.util import AlertDefaults

from .backup_status import BackupStatusProbe
from .base import PersistenceProbe
from .health_check import HealthCheckProbe
from .stale_data import StaleDataProbe


class ProbeRegistry:
    def __init__(self, probes: Iterable[PersistenceProbe] = ()) -> None:
        self._probes: Dict[str, PersistenceProbe] = {}
        for probe in probes:
            self.register(probe)

    def register(self, probe: PersistenceProbe) -> None:
        self._probes[probe.kind] = probe

    def get(self, kind: str | None) -> Optional[PersistenceProbe]:
        if kind is None:
            return None
        return self._probes.get(kind)

    def has_probe(self, kind: str | None) -> bool:
        return self.get(kind) is not None

    @property
    def kinds(self) -> frozenset:
        return frozenset(self._probes)

    @classmethod
    def default(
        cls,
        client: httpx.AsyncClient,
        health_check_url: str,
        store: KeyValueStore,
        clock: Scheduler,
        health_check_timeout: float = AlertDefaults.HEALTH_CHECK_TIMEOUT,
        stale_after: timedelta = timedelta(minutes=AlertDefaults.DATA_STALE_MINUTES),
    ) -> "ProbeRegistry":
        return cls(
            [
                HealthCheckProbe(client, health_check_url, health_check_timeout),
                StaleDataProbe(store, clock, stale_after),
                BackupStatusProbe(store),
            ]
        )
