"""Tick schedulers that drive :meth:`GameEngine.advance_tick`.

The engine never owns a timer. It only signals a scheduler to start,
stop, or change its interval; the scheduler invokes the registered
callback once per tick, never overlapping two calls.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]


class Scheduler(Protocol):
    """Contract between the engine and whatever drives its ticks."""

    @property
    def running(self) -> bool: ...

    @property
    def interval_ms(self) -> float | None: ...

    def set_callback(self, callback: TickCallback) -> None: ...

    def start(self, interval_ms: float) -> None: ...

    def stop(self) -> None: ...

    def set_interval(self, interval_ms: float) -> None: ...


class ManualScheduler:
    """Synchronous scheduler stepped explicitly by the caller.

    Nothing happens in the background: :meth:`fire` runs one tick and
    :meth:`run` keeps firing until the scheduler is stopped. Simulated
    time advances by the current interval per tick.
    """

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self._running = False
        self._interval_ms: float | None = None
        self.ticks = 0
        self.elapsed_ms = 0.0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def interval_ms(self) -> float | None:
        return self._interval_ms

    def set_callback(self, callback: TickCallback) -> None:
        self._callback = callback

    def start(self, interval_ms: float) -> None:
        self._interval_ms = interval_ms
        self._running = True

    def stop(self) -> None:
        self._running = False

    def set_interval(self, interval_ms: float) -> None:
        self._interval_ms = interval_ms

    def fire(self) -> bool:
        """Run a single tick. Returns False if the scheduler is stopped."""
        if not self._running or self._callback is None:
            return False
        self.elapsed_ms += self._interval_ms or 0.0
        self.ticks += 1
        self._callback()
        return True

    def run(self, max_ticks: int) -> int:
        """Fire up to *max_ticks* ticks; return how many actually ran."""
        fired = 0
        while fired < max_ticks and self.fire():
            fired += 1
        return fired


class AsyncioScheduler:
    """Runs the tick callback from a single asyncio task.

    Each iteration sleeps the current interval and then calls the
    callback, so ticks are dispatched serially. :meth:`start` must be
    called while an event loop is running.
    """

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self._interval_ms: float | None = None
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval_ms(self) -> float | None:
        return self._interval_ms

    def set_callback(self, callback: TickCallback) -> None:
        self._callback = callback

    def start(self, interval_ms: float) -> None:
        """(Re)start the tick loop at *interval_ms*."""
        self.stop()
        self._interval_ms = interval_ms
        self._task = asyncio.get_running_loop().create_task(self._tick_loop())

    def stop(self) -> None:
        task, self._task = self._task, None
        # Called from inside the callback: the loop sees the detached
        # task and exits on its own.
        if (
            task is not None
            and not task.done()
            and task is not asyncio.current_task()
        ):
            task.cancel()

    def set_interval(self, interval_ms: float) -> None:
        """Change the interval; applies from the next sleep."""
        self._interval_ms = interval_ms

    async def aclose(self) -> None:
        """Stop the loop and wait for its task to finish."""
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _tick_loop(self) -> None:
        me = asyncio.current_task()
        try:
            while self._task is me:
                assert self._interval_ms is not None  # noqa: S101
                await asyncio.sleep(self._interval_ms / 1000.0)
                if self._task is not me:
                    break
                if self._callback is not None:
                    self._callback()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick callback failed; stopping scheduler.")
            if self._task is me:
                self._task = None
