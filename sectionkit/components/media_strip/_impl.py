"""
MediaStripRenderer - Horizontal rows with left/right media alternation.

Placement rules, per 0-based row index i:
- neither or both of media_left/media_right: even -> left, odd -> right
- media_left only: always left
- media_right only: always right
Rows without main_media render no media (and skip the media hooks).

Hook order per row:
    [media hooks] before_post_title, after_post_title,
    before_post_content, after_post_content,
    before_post_link, after_post_link [media hooks]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sectionkit.components.hooks import NO_HOOKS, HookSet
from sectionkit.core.entities import BaseContent
from sectionkit.core.services.paths import item_path
from sectionkit.core.services.text import (
    DEFAULT_CONTENT_LENGTH,
    TRUNCATION_MARKER,
    class_names,
    escape,
    truncate_content,
)

from .models import MediaPlacement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaStripConfig:
    """Media strip rendering configuration."""

    content_length: int = DEFAULT_CONTENT_LENGTH
    truncation_marker: str = TRUNCATION_MARKER
    read_more_label: str = "Read More"
    path: str = "posts"


DEFAULT_MEDIA_STRIP_CONFIG = MediaStripConfig()


# --- Placement ---


def compute_placement(index: int, media_left: bool, media_right: bool) -> MediaPlacement:
    """Side the media goes on for row index."""
    if media_left and not media_right:
        return "left"
    if media_right and not media_left:
        return "right"
    return "left" if index % 2 == 0 else "right"


def compute_placements(
    count: int,
    media_left: bool = False,
    media_right: bool = False,
) -> tuple[MediaPlacement, ...]:
    return tuple(compute_placement(i, media_left, media_right) for i in range(count))


def placement_for(
    item: BaseContent,
    index: int,
    media_left: bool,
    media_right: bool,
) -> MediaPlacement | None:
    """Placement for an item, or None when it has no media."""
    if not item.main_media:
        return None
    return compute_placement(index, media_left, media_right)


# --- Renderer ---


class MediaStripRenderer:
    """Renders items as rows of text with media alongside."""

    def __init__(
        self,
        config: MediaStripConfig = DEFAULT_MEDIA_STRIP_CONFIG,
        hooks: HookSet = NO_HOOKS,
    ) -> None:
        self._config = config
        self._hooks = hooks

    def _render_media(self, item: BaseContent, clickable: bool) -> str:
        clickable_attr = ' data-clickable="true"' if clickable else ""
        return (
            self._hooks.render("before_post_media", item)
            + f'<img class="section-standard__image" src="{escape(item.main_media)}"'
            f' alt="{escape(item.title)}"{clickable_attr}>'
            + self._hooks.render("after_post_media", item)
        )

    def _render_content(self, item: BaseContent, read_more: bool) -> str:
        hooks = self._hooks
        cfg = self._config

        if not read_more:
            return (
                hooks.render("before_post_content", item)
                + item.body
                + hooks.render("after_post_content", item)
            )

        content = truncate_content(item.body, cfg.content_length, cfg.truncation_marker)
        href = item_path(cfg.path, item)
        return (
            hooks.render("before_post_content", item)
            + content
            + hooks.render("after_post_content", item)
            + hooks.render("before_post_link", item)
            + f'<a href="{escape(href)}">{escape(cfg.read_more_label)}</a>'
            + hooks.render("after_post_link", item)
        )

    def render_row(
        self,
        item: BaseContent,
        placement: MediaPlacement | None,
        read_more: bool,
        clickable_media: bool,
    ) -> str:
        hooks = self._hooks
        text_class = "section-standard__text" if item.main_media else "section-standard__text--wide"

        left = self._render_media(item, clickable_media) if placement == "left" else ""
        # Title and content hooks run before right-hand media hooks
        text = (
            f'<div class="{text_class}">'
            + hooks.render("before_post_title", item)
            + f'<h3 class="heading-tertiary">{escape(item.title)}</h3>'
            + hooks.render("after_post_title", item)
            + self._render_content(item, read_more)
            + "</div>"
        )
        right = self._render_media(item, clickable_media) if placement == "right" else ""

        return f'<div class="section-standard__post">{left}{text}{right}</div>'

    def render(
        self,
        items: Sequence[BaseContent],
        title: str,
        *,
        media_left: bool = False,
        media_right: bool = False,
        clickable_media: bool = False,
        read_more: bool = False,
        empty_message: str = "",
        class_name: str | None = None,
    ) -> tuple[str, tuple[MediaPlacement | None, ...]]:
        hooks = self._hooks
        logger.debug("Rendering media strip %r with %d items", title, len(items))

        placements = tuple(
            placement_for(item, i, media_left, media_right) for i, item in enumerate(items)
        )

        head = (
            hooks.render("before_title")
            + f'<h2 class="heading-secondary section-standard__header">{escape(title)}</h2>'
            + hooks.render("after_title")
        )

        before_posts = hooks.render("before_posts")
        if items:
            body = "".join(
                self.render_row(item, placement, read_more, clickable_media)
                for item, placement in zip(items, placements, strict=True)
            )
        else:
            body = f'<h3 class="heading-tertiary">{escape(empty_message)}</h3>'
        after_posts = hooks.render("after_posts")

        html = (
            f'<section class="{class_names(class_name, "section-standard")}">'
            f"{head}{before_posts}{body}{after_posts}"
            "</section>"
        )
        return html, placements
