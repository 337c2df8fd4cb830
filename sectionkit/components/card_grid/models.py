"""
Card grid component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sectionkit.core.entities import BaseContent

# --- Validation Error ---


@dataclass(frozen=True)
class CardGridValidationError:
    """Card grid validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CardGridInput:
    """Input for rendering items as summary cards."""

    items: Sequence[BaseContent]
    title: str
    content_length: int | None = None  # None uses the configured default
    read_more: bool = False
    read_more_path: str | None = None  # Template with {id}/{slug}, or a bare prefix
    class_name: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class CardGridOutput:
    """Output containing rendered card grid HTML."""

    html: str
    card_count: int = 0
    errors: list[CardGridValidationError] = field(default_factory=list)
    success: bool = True
