"""
Detail view component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from sectionkit.core.ports import (
    ApiClientPort,
    CommentRendererPort,
    ConfirmPromptPort,
    ContentStorePort,
    NavigatorPort,
)

__all__ = [
    "ApiClientPort",
    "CommentRendererPort",
    "ConfirmPromptPort",
    "ContentStorePort",
    "NavigatorPort",
    "RulesPort",
]


class RulesPort(Protocol):
    """Port for accessing detail view rules."""

    def get_header_tag(self) -> str:
        """Get the tag that marks the section header item."""
        ...

    def get_api_path(self) -> str:
        """Get the default CRUD api prefix."""
        ...

    def get_redirect_route(self) -> str:
        """Get the default route after a delete."""
        ...

    def get_confirm_message(self) -> str:
        """Get the delete confirmation prompt text."""
        ...
