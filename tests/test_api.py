import asyncio

import httpx
from fastapi.testclient import TestClient

from barangay_console.bootstrap import ServiceContainer
from barangay_console.factory import create_app
from barangay_console.modules.alertlifecycle import InMemoryKeyValueStore, VirtualScheduler
from barangay_console.settings import Settings


def failing(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, json={"status": "down"})


def build_client(handler=failing, **overrides):
    settings = Settings(_env_file=None, api_base_url="http://backend.test", **overrides)
    container = ServiceContainer(
        settings,
        scheduler=VirtualScheduler(),
        store=InMemoryKeyValueStore(),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return TestClient(create_app(container)), container


def test_health_check_endpoint():
    client, _ = build_client()

    assert client.get("/api/health-check").json() == {"status": "ok"}
    assert client.get("/health").json() == {"status": "ok"}


def test_add_list_and_dismiss():
    client, _ = build_client()

    alert_id = client.post("/alerts", json={"type": "backup-success", "message": "Backup created successfully!"}).json()["id"]
    body = client.get("/alerts").json()
    assert body["count"] == 1
    assert body["alerts"][0]["id"] == alert_id
    assert body["alerts"][0]["variant"] == "info"
    assert body["alerts"][0]["countdown_label"] == "10m"

    assert client.delete(f"/alerts/{alert_id}").json() == {"status": "success", "dismissed": True}
    assert client.delete(f"/alerts/{alert_id}").json() == {"status": "success", "dismissed": False}
    assert client.get("/alerts").json()["count"] == 0


def test_force_dismiss_of_non_dismissible_alert():
    client, _ = build_client()
    alert_id = client.post("/alerts", json={"message": "Refreshing...", "dismissible": False}).json()["id"]

    assert client.delete(f"/alerts/{alert_id}").json()["dismissed"] is False
    assert client.delete(f"/alerts/{alert_id}", params={"force": "true"}).json()["dismissed"] is True


def test_clear_all():
    client, _ = build_client()
    for n in range(3):
        client.post("/alerts", json={"message": f"alert {n}"})

    assert client.delete("/alerts").json() == {"status": "success", "message": "3 alerts cleared"}
    assert client.get("/alerts").json() == {"count": 0, "alerts": []}


def test_settings_round_trip_and_validation():
    client, container = build_client()

    assert client.get("/alerts/settings").json()["autoDismissMinutes"] == 10

    updated = client.put("/alerts/settings", json={"autoDismissMinutes": 2, "persistentKinds": []})
    assert updated.status_code == 200
    assert updated.json()["autoDismissMinutes"] == 2
    assert container.store.get("alertSettings") is not None

    rejected = client.put("/alerts/settings", json={"autoDismissMinutes": 0})
    assert rejected.status_code == 422
    assert client.get("/alerts/settings").json()["autoDismissMinutes"] == 2


def test_status_reports_and_reappearance():
    client, container = build_client()

    assert client.post("/alerts/status/backup", json={"success": False}).json()["lastBackupStatus"] == "failed"
    assert client.post("/alerts/status/data-refresh", json={"success": True}).json()["lastDataUpdate"]

    alert_id = client.post("/alerts", json={"type": "backup-failed", "message": "Backup creation failed"}).json()["id"]
    client.delete(f"/alerts/{alert_id}")
    asyncio.run(container.scheduler.advance_minutes(10))

    (view,) = client.get("/alerts").json()["alerts"]
    assert view["kind"] == "backup-failed"
    assert view["recurring"] is True
    assert view["message"].endswith("(Issue persists - Alert #2)")


def test_action_endpoint():
    client, _ = build_client()
    alert_id = client.post("/alerts", json={"message": "no action"}).json()["id"]

    assert client.post(f"/alerts/{alert_id}/action").json() == {"status": "error", "triggered": False}
    assert client.post("/alerts/missing/action").status_code == 404


def test_settings_health_check_url():
    settings = Settings(_env_file=None, api_base_url="http://backend.test/", health_check_path="api/health-check")

    assert settings.health_check_url == "http://backend.test/api/health-check"
