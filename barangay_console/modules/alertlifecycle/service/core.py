"""Alert lifecycle manager: active alerts, auto-dismiss and reappearance."""

from __future__ import annotations

import functools
import logging
from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from barangay_console.modules.alertlifecycle.domain import (
    Alert,
    AlertDescriptor,
    AlertSettings,
    AlertView,
)
from barangay_console.modules.alertlifecycle.probe import ProbeRegistry
from barangay_console.modules.alertlifecycle.render import AlertRenderer
from barangay_console.modules.alertlifecycle.scheduler import Scheduler
from barangay_console.modules.alertlifecycle.scheduler.base import is_awaitable
from barangay_console.modules.alertlifecycle.storage import (
    AlertSettingsStore,
    InMemoryKeyValueStore,
    KeyValueStore,
)
from barangay_console.modules.alertlifecycle.util import (
    generate_alert_id,
    generate_lineage_id,
    persists_marker,
)

log = logging.getLogger(__name__)

DescriptorInput = Union[AlertDescriptor, Mapping[str, Any]]


class AlertLifecycleManager:
    """Owns the active alerts of one console session.

    Public operations never raise. Timers are fire-and-forget: dismissing an
    alert early leaves its auto-dismiss timer armed (it becomes a no-op), and
    clearing all alerts leaves pending persistence checks armed.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        store: KeyValueStore | None = None,
        probes: ProbeRegistry | None = None,
        renderer: AlertRenderer | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.store = store or InMemoryKeyValueStore()
        self.settings_store = AlertSettingsStore(self.store)
        self.probes = probes or ProbeRegistry()
        self.renderer = renderer or AlertRenderer()
        self._alerts: "OrderedDict[str, Alert]" = OrderedDict()
        self._settings = self._load_settings()

    # ---- state ------------------------------------------------------------
    @property
    def alerts(self) -> Tuple[Alert, ...]:
        return tuple(self._alerts.values())

    @property
    def settings(self) -> AlertSettings:
        return self._settings

    def get_alert(self, alert_id: str) -> Optional[Alert]:
        return self._alerts.get(alert_id)

    def render(self) -> List[AlertView]:
        return self.renderer.render(self._alerts.values(), self._settings, self.scheduler.now())

    # ---- operations -------------------------------------------------------
    def add_alert(self, descriptor: DescriptorInput) -> str:
        desc = self._coerce(descriptor)
        at = self.scheduler.now()
        alert = Alert(
            id=self._new_id(at),
            lineage_id=desc.lineage_id or generate_lineage_id(),
            message=desc.message,
            created_at=at,
            last_shown_at=at,
            kind=desc.kind,
            severity=desc.severity,
            original_message=desc.original_message,
            details=desc.details,
            dismissible=desc.dismissible,
            action=desc.action,
            icon=desc.icon,
            position=desc.position,
            dismiss_count=desc.dismiss_count,
        )
        self._alerts[alert.id] = alert
        log.debug("Alert %s added (kind=%s, dismiss_count=%d)", alert.id, alert.kind, alert.dismiss_count)

        settings = self._settings
        if settings.auto_dismisses(alert.kind):
            try:
                self.scheduler.call_later(
                    settings.auto_dismiss_seconds, functools.partial(self._expire, alert.id)
                )
                alert.expires_at = at + timedelta(seconds=settings.auto_dismiss_seconds)
            except Exception:  # noqa: BLE001
                log.exception("Could not schedule auto-dismiss for alert %s", alert.id)
        return alert.id

    def dismiss_alert(self, alert_id: str, force: bool = False) -> bool:
        """Remove an alert at the user's (or producer's) request.

        Unknown ids are ignored so timer/click races stay harmless. An alert
        marked non-dismissible is only removed with ``force=True``.
        """
        try:
            alert = self._alerts.get(alert_id)
            if alert is None:
                log.debug("Dismiss for unknown alert %s ignored", alert_id)
                return False
            if not alert.dismissible and not force:
                log.info("Alert %s is not dismissible, keeping it.", alert_id)
                return False
            del self._alerts[alert_id]
            log.info("Alert %s dismissed (kind=%s)", alert_id, alert.kind)
            self._schedule_persistence_check(alert)
            return True
        except Exception:  # noqa: BLE001
            log.exception("Unexpected error dismissing alert %s", alert_id)
            return False

    def clear_all_alerts(self) -> int:
        count = len(self._alerts)
        self._alerts.clear()
        log.info("Cleared %d alerts.", count)
        return count

    def update_settings(self, new_settings: Union[AlertSettings, Mapping[str, Any]]) -> AlertSettings:
        """Replace and persist the settings; running timers keep their old delay."""
        try:
            if isinstance(new_settings, AlertSettings):
                settings = new_settings.model_copy(deep=True)
            else:
                settings = AlertSettings.model_validate(dict(new_settings))
        except ValidationError as exc:
            log.warning("Rejected alert settings update: %s", exc.errors())
            return self._settings
        except (TypeError, ValueError) as exc:
            log.warning("Rejected alert settings update %r: %s", new_settings, exc)
            return self._settings
        self._settings = settings
        self.settings_store.save(settings)
        log.info(
            "Alert settings updated (auto_dismiss=%s, minutes=%d, retry=%s)",
            settings.auto_dismiss_enabled,
            settings.auto_dismiss_minutes,
            settings.retry_on_persistence,
        )
        return settings

    async def trigger_action(self, alert_id: str) -> bool:
        alert = self._alerts.get(alert_id)
        if alert is None or alert.action is None or alert.action.handler is None:
            return False
        try:
            result = alert.action.handler()
            if is_awaitable(result):
                await result
        except Exception:  # noqa: BLE001
            log.exception("Action %r of alert %s failed", alert.action.label, alert_id)
            return False
        return True

    async def check_persistence(self, alert: Alert) -> Optional[str]:
        """Re-show ``alert`` when its probe reports the condition still holds."""
        if not self._settings.retry_on_persistence:
            return None
        probe = self.probes.get(alert.kind)
        if probe is None:
            return None

        try:
            persists = await probe.persists(alert)
        except Exception as exc:  # noqa: BLE001
            persists = probe.fail_safe
            log.warning(
                "Persistence probe for %s failed (%s), treating as %s.",
                alert.kind,
                exc,
                "persisting" if persists else "resolved",
            )

        if not persists:
            log.info("Condition behind %s alert %s resolved.", alert.kind, alert.lineage_id)
            return None

        descriptor = AlertDescriptor.reappearing(alert)
        if descriptor.dismiss_count > 0:
            descriptor.message += persists_marker(descriptor.dismiss_count)
        log.info(
            "Condition behind %s alert %s persists, showing it again (#%d).",
            alert.kind,
            alert.lineage_id,
            descriptor.dismiss_count + 1,
        )
        return self.add_alert(descriptor)

    # ---- internals --------------------------------------------------------
    def _expire(self, alert_id: str) -> None:
        if self._alerts.pop(alert_id, None) is not None:
            log.debug("Alert %s auto-dismissed", alert_id)

    def _schedule_persistence_check(self, alert: Alert) -> None:
        settings = self._settings
        if not settings.retry_on_persistence or not self.probes.has_probe(alert.kind):
            return
        try:
            self.scheduler.call_later(
                settings.auto_dismiss_seconds,
                functools.partial(self.check_persistence, alert.snapshot()),
            )
        except Exception:  # noqa: BLE001
            log.exception("Could not schedule persistence check for alert %s", alert.id)
            return
        log.debug(
            "Persistence check for %s scheduled in %d minutes",
            alert.kind,
            settings.auto_dismiss_minutes,
        )

    def _new_id(self, at: datetime) -> str:
        alert_id = generate_alert_id(at)
        while alert_id in self._alerts:
            alert_id = generate_alert_id(at)
        return alert_id

    def _load_settings(self) -> AlertSettings:
        try:
            return self.settings_store.load()
        except Exception:  # noqa: BLE001
            log.exception("Falling back to default alert settings")
            return AlertSettings()

    @staticmethod
    def _coerce(descriptor: DescriptorInput) -> AlertDescriptor:
        if isinstance(descriptor, AlertDescriptor):
            return descriptor
        try:
            return AlertDescriptor.from_mapping(descriptor or {})
        except Exception as exc:  # noqa: BLE001
            log.warning("Malformed alert descriptor %r: %s", descriptor, exc)
            message = descriptor.get("message") if isinstance(descriptor, Mapping) else None
            return AlertDescriptor(message="" if message is None else str(message))
