from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sectionkit.core.entities import BaseContent


class ContentStorePort(Protocol):
    """Externally owned content collection."""

    def items(self) -> Sequence[BaseContent]:
        """Current items, in display order."""
        ...

    def remove(self, item_id: str) -> int:
        """Remove items whose id matches. Returns the number removed."""
        ...
