"""
Detail view component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from sectionkit.core.entities import ANONYMOUS, BaseContent, Viewer

# --- Validation Error ---


@dataclass(frozen=True)
class DetailViewValidationError:
    """Detail view validation error."""

    code: str
    message: str
    field: str | None = None


# --- Page Head ---


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None
    content: str = ""


@dataclass(frozen=True)
class PageHead:
    """Head metadata derived from the displayed item."""

    title: str
    description: str = ""
    image: str | None = None
    keywords: str = ""

    def to_meta_tags(self) -> list[MetaTag]:
        """Convert to list of MetaTag objects for rendering."""
        tags = [
            MetaTag(name="description", content=self.description),
            MetaTag(name="keywords", content=self.keywords),
            MetaTag(property="og:title", content=self.title),
            MetaTag(property="og:description", content=self.description),
        ]
        if self.image:
            tags.append(MetaTag(property="og:image", content=self.image))
        return tags


# --- Input Models ---


@dataclass(frozen=True)
class DetailOptions:
    """Presentation and routing options for a detail view."""

    enable_commenting: bool = False
    api_path: str | None = None  # CRUD prefix, defaults to the configured api path
    path_prefix: str | None = None  # Prefix for the edit page
    redirect_route: str | None = None  # Where to go after a delete
    empty_title: str = ""
    empty_message: str = ""
    class_name: str | None = None


@dataclass(frozen=True)
class DetailViewInput:
    """Input for rendering a single item in full."""

    item: BaseContent | None
    viewer: Viewer = ANONYMOUS
    options: DetailOptions = field(default_factory=DetailOptions)
    all_items: Sequence[BaseContent] = ()


DeleteStage = Literal["confirm", "request", "remove", "navigate"]
DeleteOutcome = Literal["deleted", "cancelled", "failed"]


@dataclass(frozen=True)
class DeleteInput:
    """Input for the confirm -> request -> remove -> navigate delete flow."""

    item_id: str
    api_path: str | None = None
    redirect_route: str | None = None
    confirm_message: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class DetailViewOutput:
    """Output containing rendered detail HTML and head metadata."""

    html: str
    page_head: PageHead | None = None
    is_empty: bool = False
    errors: list[DetailViewValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class DeleteOutput:
    """Output of the delete flow, including the stages that completed."""

    outcome: DeleteOutcome
    completed_stages: tuple[DeleteStage, ...] = ()
    removed_count: int = 0
    redirect_route: str | None = None
    errors: list[DetailViewValidationError] = field(default_factory=list)
    success: bool = True
