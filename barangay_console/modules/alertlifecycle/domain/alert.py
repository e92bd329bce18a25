"""Active alert record."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Awaitable, Callable, Optional, Union

from barangay_console.modules.alertlifecycle.util import AlertDefaults, AlertPosition, Severity

ActionHandler = Callable[[], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class AlertAction:
    label: str
    handler: Optional[ActionHandler] = None
    icon: Optional[str] = None
    variant: str = AlertDefaults.ACTION_VARIANT


@dataclass
class Alert:
    id: str
    lineage_id: str
    message: str
    created_at: datetime
    last_shown_at: datetime
    kind: Optional[str] = None
    severity: Severity = Severity.INFO
    original_message: Optional[str] = None
    details: Optional[str] = None
    dismissible: bool = True
    action: Optional[AlertAction] = None
    icon: Optional[str] = None
    position: AlertPosition = AlertPosition.RELATIVE
    expires_at: Optional[datetime] = None
    dismiss_count: int = 0

    @property
    def base_message(self) -> str:
        return self.original_message if self.original_message is not None else self.message

    def snapshot(self) -> "Alert":
        return replace(self)
