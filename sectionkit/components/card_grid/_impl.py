"""
CardGridRenderer - Summary cards for a set of content items.

Key behaviors:
- Content truncated by character count with a marker
- Content inserted verbatim (already sanitized upstream)
- Read-more link only when enabled
- No items renders the title and an empty list
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sectionkit.core.entities import BaseContent
from sectionkit.core.services.paths import item_path
from sectionkit.core.services.text import (
    DEFAULT_CONTENT_LENGTH,
    TRUNCATION_MARKER,
    class_names,
    escape,
    truncate_content,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardGridConfig:
    """Card grid rendering configuration."""

    content_length: int = DEFAULT_CONTENT_LENGTH
    truncation_marker: str = TRUNCATION_MARKER
    read_more_label: str = "Read More"
    read_more_path: str = "/posts/{id}"


DEFAULT_CARD_GRID_CONFIG = CardGridConfig()


class CardGridRenderer:
    """Renders items as a titled list of cards."""

    def __init__(self, config: CardGridConfig = DEFAULT_CARD_GRID_CONFIG) -> None:
        self._config = config

    def render_card(self, item: BaseContent, read_more: bool) -> str:
        cfg = self._config
        content = truncate_content(item.body, cfg.content_length, cfg.truncation_marker)

        parts = [
            '<li class="section-cards__card">',
            f'<h3 class="section-cards__title">{escape(item.title)}</h3>',
        ]
        if item.main_media:
            parts.append(
                f'<img class="section-cards__image" src="{escape(item.main_media)}"'
                f' alt="{escape(item.title)}">'
            )
        parts.append(f'<div class="section-cards__content">{content}</div>')
        if read_more:
            href = item_path(cfg.read_more_path, item)
            parts.append(
                f'<a class="section-cards__link" href="{escape(href)}">'
                f"{escape(cfg.read_more_label)}</a>"
            )
        parts.append("</li>")
        return "".join(parts)

    def render(
        self,
        items: Sequence[BaseContent],
        title: str,
        read_more: bool = False,
        class_name: str | None = None,
    ) -> str:
        logger.debug("Rendering card grid %r with %d items", title, len(items))
        cards = "".join(self.render_card(item, read_more) for item in items)
        return (
            f'<section class="{class_names(class_name, "section-cards")}">'
            f'<h2 class="heading-secondary section-cards__header">{escape(title)}</h2>'
            f'<ul class="section-cards__list">{cards}</ul>'
            "</section>"
        )
