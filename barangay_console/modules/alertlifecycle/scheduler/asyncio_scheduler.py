"""Scheduler backed by the running asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Set

from barangay_console.modules.alertlifecycle.util import now

from .base import TimerCallback, describe, is_awaitable

log = logging.getLogger(__name__)


class AsyncioScheduler:
    """Timers on an asyncio event loop.

    ``call_later`` uses the loop given to the constructor or to :meth:`bind`,
    falling back to the running loop. Without either it raises
    ``RuntimeError``.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handles: Set[asyncio.TimerHandle] = set()
        self._tasks: Set[asyncio.Task] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop | None:
        return self._loop

    def bind(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Pin the scheduler to ``loop``, or to the running loop when omitted."""
        self._loop = loop or asyncio.get_running_loop()

    def now(self) -> datetime:
        return now()

    def call_later(self, delay: float, callback: TimerCallback) -> asyncio.TimerHandle:
        loop = self._resolve_loop()
        handle: asyncio.TimerHandle

        def _fire() -> None:
            self._handles.discard(handle)
            try:
                result = callback()
            except Exception:  # noqa: BLE001
                log.exception("Timer callback %s failed", describe(callback))
                return
            if is_awaitable(result):
                task = asyncio.ensure_future(result, loop=loop)
                self._tasks.add(task)
                task.add_done_callback(self._task_done)

        handle = loop.call_later(max(delay, 0.0), _fire)
        self._handles.add(handle)
        return handle

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise RuntimeError("AsyncioScheduler has no event loop; call bind() from the loop first") from exc

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.error("Deferred alert task failed: %s", exc, exc_info=exc)

    @property
    def pending(self) -> int:
        return len(self._handles) + len(self._tasks)

    async def close(self) -> None:
        """Cancel outstanding timers and tasks; used on application shutdown."""
        for handle in list(self._handles):
            handle.cancel()
        self._handles.clear()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        log.info("Scheduler closed, %d deferred tasks cancelled.", len(tasks))
