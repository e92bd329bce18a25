"""Alert-facing HTTP endpoints used by the console shell."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import BaseModel, ValidationError

from barangay_console.bootstrap import ServiceContainer
from barangay_console.modules.alertlifecycle import AlertLifecycleManager, AlertSettings

router = APIRouter(prefix="/alerts", tags=["alerts"])


class StatusReport(BaseModel):
    success: bool = True


def get_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, "container", None)
    if not container:
        raise RuntimeError("Service container not initialized.")
    return container


def get_alert_manager(container: ServiceContainer = Depends(get_container)) -> AlertLifecycleManager:
    return container.alert_manager


@router.get("")
async def list_alerts(manager: AlertLifecycleManager = Depends(get_alert_manager)) -> Dict[str, Any]:
    views = manager.render()
    return {"count": len(views), "alerts": [view.to_dict() for view in views]}


@router.post("")
async def add_alert(
    payload: Dict[str, Any] = Body(...),
    manager: AlertLifecycleManager = Depends(get_alert_manager),
) -> Dict[str, Any]:
    alert_id = manager.add_alert(payload)
    return {"status": "success", "id": alert_id}


@router.delete("")
async def clear_alerts(manager: AlertLifecycleManager = Depends(get_alert_manager)) -> Dict[str, Any]:
    cleared = manager.clear_all_alerts()
    return builder_success(f"{cleared} alerts cleared")


@router.get("/settings")
async def read_settings(manager: AlertLifecycleManager = Depends(get_alert_manager)) -> Dict[str, Any]:
    return manager.settings.to_storage()


@router.put("/settings")
async def update_settings(
    payload: Dict[str, Any] = Body(...),
    manager: AlertLifecycleManager = Depends(get_alert_manager),
) -> Dict[str, Any]:
    try:
        settings = AlertSettings.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc
    return manager.update_settings(settings).to_storage()


@router.post("/status/data-refresh")
async def report_data_refresh(
    report: StatusReport,
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, Any]:
    stamp = container.status_recorder.record_data_refresh(report.success)
    return {"status": "success", "lastDataUpdate": stamp}


@router.post("/status/backup")
async def report_backup(
    report: StatusReport,
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, Any]:
    status = container.status_recorder.record_backup(report.success)
    return {"status": "success", "lastBackupStatus": status}


@router.delete("/{alert_id}")
async def dismiss_alert(
    alert_id: str,
    force: bool = False,
    manager: AlertLifecycleManager = Depends(get_alert_manager),
) -> Dict[str, Any]:
    dismissed = manager.dismiss_alert(alert_id, force=force)
    return {"status": "success", "dismissed": dismissed}


@router.post("/{alert_id}/action")
async def trigger_action(
    alert_id: str,
    manager: AlertLifecycleManager = Depends(get_alert_manager),
) -> Dict[str, Any]:
    if manager.get_alert(alert_id) is None:
        raise HTTPException(status_code=404, detail=f"Alert {alert_id} not found")
    triggered = await manager.trigger_action(alert_id)
    return {"status": "success" if triggered else "error", "triggered": triggered}


def builder_success(msg: str) -> Dict[str, Any]:
    return {"status": "success", "message": msg}
