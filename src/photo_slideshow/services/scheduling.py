"""Timer primitives for autoplay and animation delays."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running."""


class Scheduler(Protocol):
    """Schedules delayed callbacks on a single event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""


@dataclass
class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    loop: asyncio.AbstractEventLoop | None = None

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


@dataclass
class AutoplayTimer:
    """Owns the single periodic autoplay tick.

    Arming always cancels the previous tick first, so at most one timer is
    live no matter how often settings or the current index change.
    """

    scheduler: Scheduler
    _handle: TimerHandle | None = field(default=None, init=False, repr=False)
    _generation: int = field(default=0, init=False, repr=False)

    @property
    def is_armed(self) -> bool:
        return self._handle is not None

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """(Re)start a periodic tick every ``interval_ms`` milliseconds."""
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.cancel()
        generation = self._generation
        delay = interval_ms / 1000

        def tick() -> None:
            # A stale callback can still fire if its handle was cancelled
            # after the loop already picked it up.
            if generation != self._generation:
                return
            self._handle = self.scheduler.call_later(delay, tick)
            callback()

        self._handle = self.scheduler.call_later(delay, tick)

    def cancel(self) -> None:
        """Cancel the pending tick, if any."""
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self) -> None:
        """Tear down the timer for good."""
        self.cancel()
        logger.debug("Autoplay timer closed")
