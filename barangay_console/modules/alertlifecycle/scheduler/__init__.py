"""Schedulers for auto-dismiss and persistence-check timers."""

from .asyncio_scheduler import AsyncioScheduler
from .base import Scheduler, TimerCallback, TimerHandle
from .virtual import VirtualScheduler

__all__ = ["AsyncioScheduler", "Scheduler", "TimerCallback", "TimerHandle", "VirtualScheduler"]
