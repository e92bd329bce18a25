"""Constants shared by the alert lifecycle module."""

from __future__ import annotations

from .enums import AlertKind


class StorageKeys:
    ALERT_SETTINGS = "alertSettings"
    BACKUP_SETTINGS = "backupSettings"
    BACKUP_SETTINGS_ALERTS = "alerts"
    LAST_DATA_UPDATE = "lastDataUpdate"
    LAST_BACKUP_STATUS = "lastBackupStatus"


class AlertDefaults:
    AUTO_DISMISS_ENABLED = True
    AUTO_DISMISS_MINUTES = 10
    PERSISTENT_KINDS = (AlertKind.CRITICAL_ERROR.value, AlertKind.SECURITY_WARNING.value)
    RETRY_ON_PERSISTENCE = True

    DATA_STALE_MINUTES = 15
    HEALTH_CHECK_TIMEOUT = 5.0

    BACKUP_STATUS_FAILED = "failed"
    BACKUP_STATUS_SUCCESS = "success"

    ACTION_VARIANT = "btn-outline-primary"
    RETRY_LABEL = "Recurring issue detected"
    PERSISTS_MARKER = " (Issue persists - Alert #{number})"
