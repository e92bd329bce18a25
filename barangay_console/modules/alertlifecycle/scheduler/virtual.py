"""Deterministic scheduler driven by a virtual clock."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List

from .base import TimerCallback, describe, is_awaitable

log = logging.getLogger(__name__)

DEFAULT_START = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


@dataclass(order=True)
class _Entry:
    due: datetime
    seq: int
    callback: TimerCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler:
    """Timers fire only when :meth:`advance` moves the clock past them.

    Entries due at the same instant fire in scheduling order. Timers
    scheduled by a firing callback are honoured within the same advance.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or DEFAULT_START
        self._queue: List[_Entry] = []
        self._seq = itertools.count()

    def now(self) -> datetime:
        return self._now

    def call_later(self, delay: float, callback: TimerCallback) -> _Entry:
        entry = _Entry(
            due=self._now + timedelta(seconds=max(delay, 0.0)),
            seq=next(self._seq),
            callback=callback,
        )
        heapq.heappush(self._queue, entry)
        return entry

    @property
    def pending(self) -> int:
        return sum(1 for entry in self._queue if not entry.cancelled)

    async def advance(self, seconds: float) -> None:
        target = self._now + timedelta(seconds=seconds)
        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            if entry.cancelled:
                continue
            self._now = entry.due
            try:
                result = entry.callback()
                if is_awaitable(result):
                    await result
            except Exception:  # noqa: BLE001
                log.exception("Timer callback %s failed", describe(entry.callback))
        self._now = target

    async def advance_minutes(self, minutes: float) -> None:
        await self.advance(minutes * 60)
