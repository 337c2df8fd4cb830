"""
Navigator adapter.

Records navigation requests; the page shell reads last_route to issue
the actual redirect. Satisfies NavigatorPort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class RecordingNavigator:
    history: list[str] = field(default_factory=list)

    def go_to(self, route: str) -> None:
        logger.debug("Navigating to %s", route)
        self.history.append(route)

    @property
    def last_route(self) -> str | None:
        return self.history[-1] if self.history else None
