"""Exceptions raised inside the alert lifecycle module."""

from __future__ import annotations


class AlertLifecycleException(Exception):
    """Base error; the manager catches these before they reach callers."""


class ProbeError(AlertLifecycleException):
    """A persistence probe could not evaluate its condition."""


class SettingsLoadException(AlertLifecycleException):
    """A persisted settings blob is unreadable or invalid."""
