from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TimerPort(Protocol):
    """Repeating timer source. Handles are opaque to callers."""

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> object:
        """Call callback every interval_ms until cancelled. Returns a handle."""
        ...

    def cancel(self, handle: object) -> None:
        """Cancel a handle. Cancelling twice is a no-op."""
        ...
