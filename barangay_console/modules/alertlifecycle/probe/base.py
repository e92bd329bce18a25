"""Persistence probe contract."""

from __future__ import annotations

from typing import Protocol

from barangay_console.modules.alertlifecycle.domain import Alert


class PersistenceProbe(Protocol):
    kind: str
    # Verdict used when the probe itself fails.
    fail_safe: bool

    async def persists(self, alert: Alert) -> bool:
        ...
