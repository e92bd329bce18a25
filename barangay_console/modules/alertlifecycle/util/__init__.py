"""Utility modules for the alert lifecycle manager."""

from .constants import AlertDefaults, StorageKeys
from .enums import AlertKind, AlertPosition, Severity
from .exceptions import AlertLifecycleException, ProbeError, SettingsLoadException
from .utils import (
    format_iso_datetime,
    generate_alert_id,
    generate_lineage_id,
    now,
    parse_iso_datetime,
    persists_marker,
)

__all__ = [
    "AlertDefaults",
    "StorageKeys",
    "AlertKind",
    "AlertPosition",
    "Severity",
    "AlertLifecycleException",
    "ProbeError",
    "SettingsLoadException",
    "format_iso_datetime",
    "generate_alert_id",
    "generate_lineage_id",
    "now",
    "parse_iso_datetime",
    "persists_marker",
]
