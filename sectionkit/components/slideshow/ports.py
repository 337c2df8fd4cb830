"""
Slideshow component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from sectionkit.core.ports import TimerPort

__all__ = ["RulesPort", "TimerPort"]


class RulesPort(Protocol):
    """Port for accessing slideshow rules."""

    def get_slideshow_interval_ms(self) -> int:
        """Get milliseconds between automatic advances."""
        ...

    def get_slideshow_empty_title(self) -> str:
        """Get the title shown when there are no slides."""
        ...

    def get_slideshow_empty_message(self) -> str:
        """Get the message shown when there are no slides."""
        ...
