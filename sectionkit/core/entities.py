"""
Domain entities for section-kit.

ContentItem is a tagged union over the renderable variants
(post, blog, event, product). Renderers only ever read the shared
field subset defined on BaseContent; variant fields are opaque to them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# --- Content Variants ---

ContentKind = Literal["post", "blog", "event", "product"]


class BaseContent(BaseModel):
    """Fields shared by every content variant."""

    id: str = ""
    title: str = ""
    content: str | None = None  # Pre-sanitized HTML
    main_media: str | None = None
    tags: list[str] = Field(default_factory=list)
    published: bool = True
    comments: list[Any] = Field(default_factory=list)  # Owned by the comment subsystem
    slug: str | None = None

    @property
    def tag_set(self) -> frozenset[str]:
        return frozenset(self.tags)

    @property
    def body(self) -> str:
        """Content with absent text normalised to an empty string."""
        return self.content if self.content is not None else ""

    def is_empty(self) -> bool:
        """True when none of the identifying/displayable fields are populated."""
        return not (self.id or self.title or self.content or self.main_media)


class PostItem(BaseContent):
    kind: Literal["post"] = "post"
    author: str | None = None


class BlogItem(BaseContent):
    kind: Literal["blog"] = "blog"
    author: str | None = None


class EventItem(BaseContent):
    kind: Literal["event"] = "event"
    starts_at: datetime | None = None
    location: str | None = None


class ProductItem(BaseContent):
    kind: Literal["product"] = "product"
    price: float | None = None
    sku: str | None = None


ContentItem = Annotated[
    PostItem | BlogItem | EventItem | ProductItem,
    Field(discriminator="kind"),
]

_content_adapter: TypeAdapter[ContentItem] = TypeAdapter(ContentItem)


def parse_content_item(data: dict[str, Any]) -> BaseContent:
    """Validate a raw mapping into the matching content variant."""
    return _content_adapter.validate_python(data)


def parse_content_items(rows: Iterable[dict[str, Any]]) -> list[BaseContent]:
    return [parse_content_item(row) for row in rows]


# --- Viewer ---


class Viewer(BaseModel):
    """Capabilities of whoever is looking at the page."""

    model_config = ConfigDict(frozen=True)

    is_admin: bool = False


ANONYMOUS = Viewer()


# --- Filtering ---


@dataclass(frozen=True)
class FilterCriteria:
    """
    Bound + tag predicate for selecting a content subset.

    Invariants:
    - I1: max_items is non-negative
    - I2: required_tags is compared case-sensitively
    """

    max_items: int
    required_tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.max_items < 0:
            raise ValueError(f"max_items must be non-negative, got {self.max_items}")
        # Accept any iterable of tags but store it frozen
        if not isinstance(self.required_tags, frozenset):
            object.__setattr__(self, "required_tags", frozenset(self.required_tags))
