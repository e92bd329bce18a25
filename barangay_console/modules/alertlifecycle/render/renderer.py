"""Projection of active alerts onto view models."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, List

from barangay_console.modules.alertlifecycle.domain import (
    ActionButton,
    Alert,
    AlertSettings,
    AlertView,
)
from barangay_console.modules.alertlifecycle.util import AlertDefaults, Severity

_SOUND_SEVERITIES = frozenset({Severity.WARNING, Severity.DANGER})


class AlertRenderer:
    """Stateless: the same alerts, settings and instant give the same views."""

    def render(self, alerts: Iterable[Alert], settings: AlertSettings, at: datetime) -> List[AlertView]:
        return [self.render_one(alert, settings, at) for alert in alerts]

    def render_one(self, alert: Alert, settings: AlertSettings, at: datetime) -> AlertView:
        display = settings.notification_settings
        recurring = alert.dismiss_count > 0 and display.show_retry_count

        countdown_seconds = None
        countdown_label = None
        if display.show_countdown and alert.expires_at is not None:
            remaining = (alert.expires_at - at).total_seconds()
            countdown_seconds = max(int(math.ceil(remaining)), 0)
            countdown_label = self._countdown_label(countdown_seconds)

        action = None
        if alert.action is not None:
            action = ActionButton(
                label=alert.action.label,
                variant=alert.action.variant or AlertDefaults.ACTION_VARIANT,
                icon=alert.action.icon,
            )

        return AlertView(
            id=alert.id,
            kind=alert.kind,
            variant=alert.severity.variant,
            message=alert.message or "",
            dismissible=alert.dismissible,
            position=alert.position.value,
            icon=alert.icon or alert.severity.icon,
            details=alert.details,
            action=action,
            recurring=recurring,
            retry_label=AlertDefaults.RETRY_LABEL if recurring else None,
            countdown_seconds=countdown_seconds,
            countdown_label=countdown_label,
            play_sound=display.enable_sound and alert.severity in _SOUND_SEVERITIES,
        )

    @staticmethod
    def _countdown_label(seconds: int) -> str:
        minutes = int(math.ceil(seconds / 60))
        if minutes >= 1:
            return f"{minutes}m"
        return f"{seconds}s"
