from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from sectionkit.core.entities import BaseContent


@dataclass(frozen=True)
class CommentInput:
    """Everything the comment subsystem receives from a detail view."""

    item: BaseContent
    comments: Sequence[Any]
    enable_commenting: bool
    api_path: str | None
    before_comment_form: Callable[[], str]
    after_comment_form: Callable[[], str]


class CommentRendererPort(Protocol):
    def render(self, inp: CommentInput) -> str:
        """Render the comment thread and (optionally) its form."""
        ...
