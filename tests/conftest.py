import json

import httpx
import pytest

from barangay_console.modules.alertlifecycle import (
    AlertLifecycleManager,
    InMemoryKeyValueStore,
    ProbeRegistry,
    VirtualScheduler,
)

HEALTH_URL = "http://backend.test/api/health-check"


def _healthy(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"status": "ok"})


def _failing(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, json={"status": "down"})


@pytest.fixture
def health_url():
    return HEALTH_URL


@pytest.fixture
def healthy():
    return _healthy


@pytest.fixture
def failing():
    return _failing


@pytest.fixture
def build_manager():
    """Factory for a manager on a virtual clock with a mocked backend."""

    def build(handler=_healthy, store=None, **alert_settings):
        scheduler = VirtualScheduler()
        store = store if store is not None else InMemoryKeyValueStore()
        if alert_settings:
            store.set("alertSettings", json.dumps(alert_settings))
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        probes = ProbeRegistry.default(client, HEALTH_URL, store, scheduler)
        manager = AlertLifecycleManager(scheduler, store=store, probes=probes)
        return manager, scheduler

    return build
