"""Client-side alert lifecycle management for the health-center console."""

from .domain import Alert, AlertAction, AlertDescriptor, AlertSettings, AlertView
from .presets import CommonAlerts
from .probe import ProbeRegistry
from .scheduler import AsyncioScheduler, VirtualScheduler
from .service import AlertLifecycleManager
from .status import StatusRecorder
from .storage import InMemoryKeyValueStore, JsonFileKeyValueStore

__all__ = [
    "Alert",
    "AlertAction",
    "AlertDescriptor",
    "AlertSettings",
    "AlertView",
    "CommonAlerts",
    "ProbeRegistry",
    "AsyncioScheduler",
    "VirtualScheduler",
    "AlertLifecycleManager",
    "StatusRecorder",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
