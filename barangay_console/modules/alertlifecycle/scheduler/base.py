"""Scheduler contract for deferred alert work."""

from __future__ import annotations

import inspect
from datetime import datetime
from typing import Any, Awaitable, Callable, Protocol, Union

TimerCallback = Callable[[], Union[None, Awaitable[Any]]]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Clock plus one-shot timers.

    Callbacks may be plain functions or coroutine functions; a coroutine
    result is awaited by the scheduler, never by the code that scheduled it.
    """

    def now(self) -> datetime:
        ...

    def call_later(self, delay: float, callback: TimerCallback) -> TimerHandle:
        ...


def describe(callback: TimerCallback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def is_awaitable(value: Any) -> bool:
    return inspect.isawaitable(value)
