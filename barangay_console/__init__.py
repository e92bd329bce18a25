"""Barangay health-center admin console: alert lifecycle service."""

__version__ = "1.0.0"
