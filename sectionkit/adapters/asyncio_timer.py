"""
Asyncio interval timer adapter.

Repeating timer on the running event loop. Satisfies TimerPort.

Key behaviors:
- Re-arms with loop.call_later after each callback
- cancel() releases the pending loop handle; no callback fires afterwards
- Callback exceptions are logged and the timer keeps running
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class IntervalHandle:
    """Handle for one repeating timer."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval_s: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._interval_s = interval_s
        self._callback = callback
        self._pending: asyncio.TimerHandle | None = None
        self._cancelled = False
        self.fired = 0

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def arm(self) -> None:
        self._pending = self._loop.call_later(self._interval_s, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self.fired += 1
        try:
            self._callback()
        except Exception:
            logger.exception("Error in interval timer callback")
        if not self._cancelled:
            self.arm()

    def cancel(self) -> None:
        self._cancelled = True
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None


class AsyncioIntervalTimer:
    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> IntervalHandle:
        loop = self._loop or asyncio.get_running_loop()
        handle = IntervalHandle(loop, interval_ms / 1000.0, callback)
        handle.arm()
        return handle

    def cancel(self, handle: object) -> None:
        if not isinstance(handle, IntervalHandle):
            raise TypeError(f"Not an interval handle: {handle!r}")
        handle.cancel()
