"""
Confirmation prompt adapters. Satisfy ConfirmPromptPort.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticConfirmPrompt:
    """Always answers the same way (pre-confirmed server-side actions, tests)."""

    answer: bool = True

    def confirm(self, message: str) -> bool:
        logger.debug("Auto-answering %r with %s", message, self.answer)
        return self.answer


class InteractiveConfirmPrompt:
    """Asks on the terminal; only "y"/"yes" confirms."""

    def __init__(self, read_line: Callable[[str], str] = input) -> None:
        self._read_line = read_line

    def confirm(self, message: str) -> bool:
        answer = self._read_line(f"{message} [y/N] ")
        return answer.strip().lower() in ("y", "yes")
