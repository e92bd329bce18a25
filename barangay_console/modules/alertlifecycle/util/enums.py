"""Enumerations for the alert lifecycle module."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    INFO = ("info", "bi bi-info-circle")
    SUCCESS = ("success", "bi bi-check-circle")
    WARNING = ("warning", "bi bi-exclamation-triangle")
    DANGER = ("danger", "bi bi-exclamation-octagon-fill")

    def __new__(cls, level: str, icon: str) -> "Severity":  # type: ignore[override]
        obj = str.__new__(cls, level)
        obj._value_ = level
        obj.icon = icon
        return obj  # type: ignore[return-value]

    icon: str

    @property
    def variant(self) -> str:
        # Bootstrap alert variants share the severity names.
        return self.value

    @classmethod
    def parse(cls, value: "str | Severity | None") -> "Severity":
        if isinstance(value, Severity):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.INFO


class AlertKind(str, Enum):
    DATA_REFRESH = "data-refresh"
    DATA_REFRESH_FAILED = "data-refresh-failed"
    DATA_REFRESH_SUCCESS = "data-refresh-success"
    BACKUP_SUCCESS = "backup-success"
    BACKUP_FAILED = "backup-failed"
    CONNECTION_ERROR = "connection-error"
    CONNECTION_RESTORED = "connection-restored"
    CRITICAL_ERROR = "critical-error"
    SECURITY_WARNING = "security-warning"
    OPERATION_SUCCESS = "operation-success"


class AlertPosition(str, Enum):
    RELATIVE = "relative"
    FIXED = "fixed"
