"""Ready-made alerts raised by the dashboard and backup screens."""

from __future__ import annotations

from typing import Mapping, Optional

from barangay_console.modules.alertlifecycle.domain import ActionHandler, AlertAction, AlertDescriptor
from barangay_console.modules.alertlifecycle.service import AlertLifecycleManager
from barangay_console.modules.alertlifecycle.util import AlertKind, AlertPosition, Severity

RETRY_ICON = "bi bi-arrow-clockwise"


class CommonAlerts:
    def __init__(self, manager: AlertLifecycleManager) -> None:
        self.manager = manager

    def _add(self, **fields) -> str:
        return self.manager.add_alert(AlertDescriptor(**fields))

    def data_refresh_started(self) -> str:
        return self._add(
            kind=AlertKind.DATA_REFRESH.value,
            severity=Severity.INFO,
            message="Refreshing data from database...",
            icon=RETRY_ICON,
            dismissible=False,
        )

    def data_refresh_failed(self, retry: Optional[ActionHandler] = None) -> str:
        message = "Unable to fetch latest data from database. Showing cached data."
        return self._add(
            kind=AlertKind.DATA_REFRESH_FAILED.value,
            severity=Severity.WARNING,
            message=message,
            original_message=message,
            icon="bi bi-exclamation-triangle",
            action=AlertAction("Retry", retry, RETRY_ICON),
            details="This alert will reappear if the connection issue persists.",
        )

    def data_refresh_succeeded(self) -> str:
        at = self.manager.scheduler.now()
        return self._add(
            kind=AlertKind.DATA_REFRESH_SUCCESS.value,
            severity=Severity.SUCCESS,
            message=f"Real-time data connected • Last updated: {at:%I:%M:%S %p}",
            icon="bi bi-check-circle",
        )

    def backup_succeeded(self, backup_info: Optional[Mapping[str, int]] = None) -> str:
        info = backup_info or {}
        return self._add(
            kind=AlertKind.BACKUP_SUCCESS.value,
            severity=Severity.SUCCESS,
            message="Backup created successfully!",
            icon="bi bi-check-circle",
            details=f"{info.get('totalPatients', 0)} patients, {info.get('totalFamilies', 0)} families",
            position=AlertPosition.FIXED,
        )

    def backup_failed(self, error: Optional[BaseException] = None, retry: Optional[ActionHandler] = None) -> str:
        return self._add(
            kind=AlertKind.BACKUP_FAILED.value,
            severity=Severity.DANGER,
            message="Backup creation failed",
            original_message="Backup creation failed",
            icon="bi bi-exclamation-triangle-fill",
            action=AlertAction("Retry Backup", retry, RETRY_ICON) if retry else None,
            details=str(error) if error else "Unknown error occurred during backup",
            position=AlertPosition.FIXED,
        )

    def connection_lost(self, service: str, reconnect: Optional[ActionHandler] = None) -> str:
        message = f"Connection to {service} lost"
        return self._add(
            kind=AlertKind.CONNECTION_ERROR.value,
            severity=Severity.DANGER,
            message=message,
            original_message=message,
            icon="bi bi-wifi-off",
            action=AlertAction("Reconnect", reconnect, RETRY_ICON) if reconnect else None,
            details="Attempting automatic reconnection...",
            position=AlertPosition.FIXED,
        )

    def connection_restored(self, service: str) -> str:
        return self._add(
            kind=AlertKind.CONNECTION_RESTORED.value,
            severity=Severity.SUCCESS,
            message=f"Connection to {service} restored",
            icon="bi bi-wifi",
            position=AlertPosition.FIXED,
        )

    def critical_error(self, message: str, details: Optional[str] = None) -> str:
        return self._add(
            kind=AlertKind.CRITICAL_ERROR.value,
            severity=Severity.DANGER,
            message=message,
            icon="bi bi-exclamation-octagon-fill",
            details=details,
            position=AlertPosition.FIXED,
        )

    def security_warning(self, message: str, details: Optional[str] = None) -> str:
        return self._add(
            kind=AlertKind.SECURITY_WARNING.value,
            severity=Severity.WARNING,
            message=message,
            icon="bi bi-shield-exclamation",
            details=details,
            position=AlertPosition.FIXED,
        )

    def operation_succeeded(self, operation: str, details: Optional[str] = None) -> str:
        return self._add(
            kind=AlertKind.OPERATION_SUCCESS.value,
            severity=Severity.SUCCESS,
            message=f"{operation} completed successfully",
            icon="bi bi-check-circle",
            details=details,
        )
