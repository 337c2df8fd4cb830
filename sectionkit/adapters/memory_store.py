"""
In-memory content store adapter.

Holds the displayed content collection for a page. Satisfies ContentStorePort.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from sectionkit.core.entities import BaseContent

logger = logging.getLogger(__name__)


class InMemoryContentStore:
    """List-backed content collection with change listeners."""

    def __init__(self, items: Iterable[BaseContent] = ()) -> None:
        self._items: list[BaseContent] = list(items)
        self._listeners: list[Callable[[Sequence[BaseContent]], None]] = []

    def items(self) -> Sequence[BaseContent]:
        return tuple(self._items)

    def set_items(self, items: Iterable[BaseContent]) -> None:
        self._items = list(items)
        self._notify()

    def subscribe(self, listener: Callable[[Sequence[BaseContent]], None]) -> None:
        """Register a callback run with the new items after every change."""
        self._listeners.append(listener)

    def remove(self, item_id: str) -> int:
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        removed = before - len(self._items)
        if removed:
            logger.debug("Removed %d item(s) with id %s", removed, item_id)
            self._notify()
        return removed

    def _notify(self) -> None:
        snapshot = self.items()
        for listener in self._listeners:
            listener(snapshot)
