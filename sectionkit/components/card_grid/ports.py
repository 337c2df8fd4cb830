"""
Card grid component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing card rendering rules."""

    def get_content_length(self) -> int:
        """Get default number of content characters shown per card."""
        ...

    def get_truncation_marker(self) -> str:
        """Get the marker appended to truncated content."""
        ...

    def get_read_more_label(self) -> str:
        """Get the read-more link text."""
        ...

    def get_read_more_path(self) -> str:
        """Get the default read-more path prefix."""
        ...
