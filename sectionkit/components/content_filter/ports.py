"""
Content filter component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing filter rules configuration."""

    def get_header_tag(self) -> str:
        """Get the tag that marks the section header item."""
        ...
