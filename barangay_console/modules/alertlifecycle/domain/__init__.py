"""Domain exports for the alert lifecycle manager."""

from .alert import ActionHandler, Alert, AlertAction
from .alert_settings import AlertSettings, NotificationSettings
from .descriptor import AlertDescriptor
from .view import ActionButton, AlertView

__all__ = [
    "ActionHandler",
    "Alert",
    "AlertAction",
    "AlertSettings",
    "NotificationSettings",
    "AlertDescriptor",
    "ActionButton",
    "AlertView",
]
