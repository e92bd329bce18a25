"""Backend liveness probe for connection errors."""

from __future__ import annotations

import logging

import httpx

from barangay_console.modules.alertlifecycle.domain import Alert
from barangay_console.modules.alertlifecycle.util import AlertDefaults, AlertKind

log = logging.getLogger(__name__)


class HealthCheckProbe:
    kind = AlertKind.CONNECTION_ERROR.value
    fail_safe = True

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        timeout: float = AlertDefaults.HEALTH_CHECK_TIMEOUT,
    ) -> None:
        self._client = client
        self.url = url
        self.timeout = timeout

    async def persists(self, alert: Alert) -> bool:
        try:
            response = await self._client.get(self.url, timeout=self.timeout)
        except httpx.HTTPError as exc:
            log.info("Health check %s failed: %s", self.url, exc)
            return True
        if not response.is_success:
            log.info("Health check %s returned HTTP %s", self.url, response.status_code)
            return True
        return False
