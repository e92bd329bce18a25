"""User-configurable alert behaviour."""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from barangay_console.modules.alertlifecycle.util import AlertDefaults


class NotificationSettings(BaseModel):
    """Presentation toggles; they never change lifecycle behaviour."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    show_countdown: bool = Field(True, alias="showCountdown")
    show_retry_count: bool = Field(True, alias="showRetryCount")
    enable_sound: bool = Field(False, alias="enableSound")


class AlertSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    auto_dismiss_enabled: bool = Field(
        AlertDefaults.AUTO_DISMISS_ENABLED, alias="autoDismissEnabled"
    )
    auto_dismiss_minutes: int = Field(
        AlertDefaults.AUTO_DISMISS_MINUTES,
        gt=0,
        validation_alias=AliasChoices("autoDismissMinutes", "autoDismissTime", "auto_dismiss_minutes"),
        serialization_alias="autoDismissMinutes",
    )
    persistent_kinds: List[str] = Field(
        default_factory=lambda: list(AlertDefaults.PERSISTENT_KINDS),
        validation_alias=AliasChoices("persistentKinds", "persistentAlerts", "persistent_kinds"),
        serialization_alias="persistentKinds",
    )
    retry_on_persistence: bool = Field(
        AlertDefaults.RETRY_ON_PERSISTENCE, alias="retryOnPersistence"
    )
    notification_settings: NotificationSettings = Field(
        default_factory=NotificationSettings, alias="notificationSettings"
    )

    @property
    def auto_dismiss_seconds(self) -> float:
        return self.auto_dismiss_minutes * 60.0

    def is_persistent(self, kind: str | None) -> bool:
        return kind is not None and kind in self.persistent_kinds

    def auto_dismisses(self, kind: str | None) -> bool:
        return self.auto_dismiss_enabled and not self.is_persistent(kind)

    def to_storage(self) -> dict:
        return self.model_dump(by_alias=True)
