"""
Media strip component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from sectionkit.core.entities import BaseContent

MediaPlacement = Literal["left", "right"]

# --- Validation Error ---


@dataclass(frozen=True)
class MediaStripValidationError:
    """Media strip validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class MediaStripInput:
    """Input for rendering items as alternating media rows."""

    items: Sequence[BaseContent]
    title: str
    media_left: bool = False
    media_right: bool = False
    clickable_media: bool = False
    read_more: bool = False
    path: str | None = None  # Read-more prefix, "/<path>/<slug or id>"
    empty_message: str = ""
    content_length: int | None = None
    class_name: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class MediaStripOutput:
    """Output containing rendered strip HTML and the media placement used per row."""

    html: str
    placements: tuple[MediaPlacement | None, ...] = ()
    errors: list[MediaStripValidationError] = field(default_factory=list)
    success: bool = True
