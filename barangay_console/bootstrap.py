"""Wiring of the alert lifecycle services for one console session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

import httpx

from barangay_console.modules.alertlifecycle import (
    AlertLifecycleManager,
    AsyncioScheduler,
    CommonAlerts,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    ProbeRegistry,
    StatusRecorder,
)
from barangay_console.modules.alertlifecycle.scheduler import Scheduler
from barangay_console.modules.alertlifecycle.storage import KeyValueStore

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires the alert services with shared settings.

    Collaborators may be passed in (tests use a virtual scheduler and a mock
    transport); anything left as ``None`` is built from ``settings``.
    """

    settings: Settings
    scheduler: Optional[Scheduler] = None
    store: Optional[KeyValueStore] = None
    http_client: Optional[httpx.AsyncClient] = None
    probes: ProbeRegistry = field(init=False)
    alert_manager: AlertLifecycleManager = field(init=False)
    common_alerts: CommonAlerts = field(init=False)
    status_recorder: StatusRecorder = field(init=False)

    def __post_init__(self) -> None:
        if self.scheduler is None:
            self.scheduler = AsyncioScheduler()
        if self.store is None:
            if self.settings.storage_path:
                self.store = JsonFileKeyValueStore(self.settings.storage_path)
            else:
                self.store = InMemoryKeyValueStore()
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(timeout=self.settings.health_check_timeout)

        self.probes = ProbeRegistry.default(
            client=self.http_client,
            health_check_url=self.settings.health_check_url,
            store=self.store,
            clock=self.scheduler,
            health_check_timeout=self.settings.health_check_timeout,
            stale_after=timedelta(minutes=self.settings.data_stale_minutes),
        )
        self.alert_manager = AlertLifecycleManager(
            self.scheduler,
            store=self.store,
            probes=self.probes,
        )
        self.common_alerts = CommonAlerts(self.alert_manager)
        self.status_recorder = StatusRecorder(self.store, self.scheduler)


async def bootstrap_services(container: ServiceContainer) -> None:
    if isinstance(container.scheduler, AsyncioScheduler) and container.scheduler.loop is None:
        # Timers requested outside a running loop land on the application loop.
        container.scheduler.bind()
    settings = container.alert_manager.settings
    log.info("...................ALERTS-BEGIN...................")
    log.info(
        "########### auto_dismiss=%s minutes=%d persistent=%s retry=%s ############",
        settings.auto_dismiss_enabled,
        settings.auto_dismiss_minutes,
        ",".join(settings.persistent_kinds) or "-",
        settings.retry_on_persistence,
    )
    log.info("Persistence probes registered for: %s", ", ".join(sorted(container.probes.kinds)))
    log.info("...................ALERTS-END...................")


async def shutdown_services(container: ServiceContainer) -> None:
    close = getattr(container.scheduler, "close", None)
    if close is not None:
        await close()
    if container.http_client is not None:
        await container.http_client.aclose()
