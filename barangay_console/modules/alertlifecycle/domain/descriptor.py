"""Partial alert input accepted by the manager."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from barangay_console.modules.alertlifecycle.util import AlertPosition, Severity

from .alert import Alert, AlertAction

# Keys used by the console front end, mapped onto descriptor fields.
_KEY_ALIASES = {
    "type": "kind",
    "variant": "severity",
    "originalMessage": "original_message",
    "dismissCount": "dismiss_count",
    "lineageId": "lineage_id",
}

_FALSE_STRINGS = {"false", "0", "no", "off"}


@dataclass
class AlertDescriptor:
    message: str = ""
    kind: Optional[str] = None
    severity: Severity = Severity.INFO
    original_message: Optional[str] = None
    details: Optional[str] = None
    dismissible: bool = True
    action: Optional[AlertAction] = None
    icon: Optional[str] = None
    position: AlertPosition = AlertPosition.RELATIVE
    dismiss_count: int = 0
    lineage_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.message = "" if self.message is None else str(self.message)
        self.severity = Severity.parse(self.severity)
        try:
            self.position = AlertPosition(self.position)
        except ValueError:
            self.position = AlertPosition.RELATIVE
        self.dismiss_count = max(int(self.dismiss_count or 0), 0)
        if isinstance(self.dismissible, str):
            self.dismissible = self.dismissible.strip().lower() not in _FALSE_STRINGS
        else:
            self.dismissible = self.dismissible is None or bool(self.dismissible)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "AlertDescriptor":
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in payload.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known or value is None:
                continue
            values[name] = value
        action = values.get("action")
        if isinstance(action, Mapping):
            values["action"] = AlertAction(
                label=str(action.get("label") or action.get("text") or ""),
                handler=action.get("handler") or action.get("onClick"),
                icon=action.get("icon"),
            )
        elif action is not None and not isinstance(action, AlertAction):
            values.pop("action")
        return cls(**values)

    @classmethod
    def reappearing(cls, alert: Alert) -> "AlertDescriptor":
        """Descriptor for re-showing ``alert`` after its condition persisted."""
        return cls(
            message=alert.base_message,
            kind=alert.kind,
            severity=alert.severity,
            original_message=alert.base_message,
            details=alert.details,
            dismissible=alert.dismissible,
            action=alert.action,
            icon=alert.icon,
            position=alert.position,
            dismiss_count=alert.dismiss_count + 1,
            lineage_id=alert.lineage_id,
        )
