"""Persistence probes run after an alert is dismissed."""

from .backup_status import BackupStatusProbe
from .base import PersistenceProbe
from .health_check import HealthCheckProbe
from .registry import ProbeRegistry
from .stale_data import StaleDataProbe

__all__ = ["BackupStatusProbe", "PersistenceProbe", "HealthCheckProbe", "ProbeRegistry", "StaleDataProbe"]
