"""
DetailView - Full rendering of one content item plus its delete flow.

Key behaviors:
- Absent/empty item renders only the empty title and message
- Page title is "<header title> | <item title>" when a header item exists
- Tags and edit/delete controls are admin-only
- Comments are delegated to the comment renderer port

Delete flow stages, each gated on the previous one:
    confirm -> request (DELETE <api_path>/<id>) -> remove from store -> navigate
Each stage consumes the token produced by the stage before it, so a later
stage cannot run without an earlier one having succeeded.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sectionkit.components.content_filter import find_header_item
from sectionkit.components.hooks import NO_HOOKS, HookSet
from sectionkit.core.entities import BaseContent, Viewer
from sectionkit.core.ports import (
    ApiClientPort,
    CommentInput,
    CommentRendererPort,
    ConfirmPromptPort,
    ContentStorePort,
    DeleteResult,
    NavigatorPort,
)
from sectionkit.core.services.paths import api_item_path, edit_path
from sectionkit.core.services.text import class_names, escape, strip_paragraph_tags

from .models import (
    DeleteOutput,
    DeleteStage,
    DetailOptions,
    DetailViewValidationError,
    PageHead,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetailConfig:
    """Detail view configuration from rules."""

    header_tag: str = "section-header"
    api_path: str = "/api/posts"
    redirect_route: str = "/posts"
    confirm_message: str = "Are you sure you want to delete this post?"


DEFAULT_DETAIL_CONFIG = DetailConfig()


# --- Page Head ---


def compose_page_title(
    item: BaseContent,
    all_items: Sequence[BaseContent],
    header_tag: str = DEFAULT_DETAIL_CONFIG.header_tag,
) -> str:
    """Composite title using the section header item when one exists."""
    header = find_header_item(all_items, header_tag)
    if header is not None and item.title:
        return f"{header.title} | {item.title}"
    return item.title


def build_page_head(
    item: BaseContent,
    all_items: Sequence[BaseContent],
    header_tag: str = DEFAULT_DETAIL_CONFIG.header_tag,
) -> PageHead:
    return PageHead(
        title=compose_page_title(item, all_items, header_tag),
        description=strip_paragraph_tags(item.body),
        image=item.main_media,
        keywords=",".join(item.tags),
    )


# --- Renderer ---


class DetailViewRenderer:
    """Renders a single item with admin controls and comments."""

    def __init__(
        self,
        config: DetailConfig = DEFAULT_DETAIL_CONFIG,
        hooks: HookSet = NO_HOOKS,
        comments: CommentRendererPort | None = None,
    ) -> None:
        self._config = config
        self._hooks = hooks
        self._comments = comments

    def render_empty(self, options: DetailOptions) -> str:
        return (
            f'<div class="{class_names("posts-show", options.class_name)}">'
            f'<h2 class="heading-secondary">{escape(options.empty_title)}</h2>'
            f'<h3 class="heading-tertiary">{escape(options.empty_message)}</h3>'
            "</div>"
        )

    def _render_tags(self, item: BaseContent, viewer: Viewer) -> str:
        if not (viewer.is_admin and item.tags):
            return ""
        tags = ", ".join(escape(tag) for tag in item.tags)
        return f'<p class="post__tags">Tags: <em>{tags}</em></p>'

    def _render_main_media(self, item: BaseContent) -> str:
        if not item.main_media:
            return ""
        return (
            '<div class="post__image">'
            f'<img src="{escape(item.main_media)}" alt="{escape(item.title)}">'
            "</div>"
        )

    def _render_admin_controls(
        self, item: BaseContent, viewer: Viewer, options: DetailOptions
    ) -> str:
        if not viewer.is_admin:
            return ""
        api_path = options.api_path or self._config.api_path
        return (
            '<div class="post__buttons">'
            f'<button class="button button-delete" type="button"'
            f' data-delete-url="{escape(api_item_path(api_path, item.id))}">Delete</button>'
            f'<a class="button button-edit" href="{escape(edit_path(options.path_prefix, item))}">'
            "Edit</a>"
            "</div>"
        )

    def _render_comments(self, item: BaseContent, options: DetailOptions) -> str:
        if self._comments is None:
            return '<div class="comments"></div>'
        return self._comments.render(
            CommentInput(
                item=item,
                comments=item.comments,
                enable_commenting=bool(options.enable_commenting),
                api_path=options.api_path,
                before_comment_form=self._hooks.bind("before_comment_form"),
                after_comment_form=self._hooks.bind("after_comment_form"),
            )
        )

    def render(self, item: BaseContent, viewer: Viewer, options: DetailOptions) -> str:
        hooks = self._hooks
        logger.debug("Rendering detail view for item %s", item.id)

        unpublished = "" if item.published else "<p><em>Not published</em></p>"

        post = (
            '<div class="post">'
            + unpublished
            + hooks.render("before_title")
            + '<h2 class="heading-secondary post__title u-margin-bottom-small">'
            + escape(item.title)
            + "</h2>"
            + hooks.render("after_title")
            + self._render_tags(item, viewer)
            + hooks.render("before_main_media")
            + self._render_main_media(item)
            + hooks.render("after_main_media")
            + hooks.render("before_content")
            + f'<div class="post__content">{item.body}</div>'
            + hooks.render("after_content")
            + self._render_admin_controls(item, viewer, options)
            + hooks.render("before_comments")
            + self._render_comments(item, options)
            + hooks.render("after_comments")
            + "</div>"
        )

        return (
            f'<div class="{class_names("posts-show", options.class_name)}">'
            + hooks.render("before_post")
            + post
            + hooks.render("after_post")
            + "</div>"
        )


# --- Delete Flow ---


@dataclass(frozen=True)
class Confirmed:
    """The user accepted the delete prompt."""

    item_id: str


@dataclass(frozen=True)
class ServerDeleted:
    """The API acknowledged the delete."""

    item_id: str
    result: DeleteResult


@dataclass(frozen=True)
class StoreUpdated:
    """The item was removed from the external collection."""

    item_id: str
    removed: int


class DeleteFlow:
    """
    Ordered delete protocol for a single item.

    State mutation never precedes server success and navigation never
    precedes state mutation. Network failure is logged and contained.
    """

    def __init__(
        self,
        *,
        prompt: ConfirmPromptPort,
        api: ApiClientPort,
        store: ContentStorePort,
        navigator: NavigatorPort,
        api_path: str,
        redirect_route: str,
        confirm_message: str,
    ) -> None:
        self._prompt = prompt
        self._api = api
        self._store = store
        self._navigator = navigator
        self._api_path = api_path
        self._redirect_route = redirect_route
        self._confirm_message = confirm_message
        self._stages: list[DeleteStage] = []

    def confirm(self, item_id: str) -> Confirmed | None:
        if not self._prompt.confirm(self._confirm_message):
            logger.warning("Delete of %s cancelled by user", item_id)
            return None
        self._stages.append("confirm")
        return Confirmed(item_id=item_id)

    async def request(self, confirmed: Confirmed) -> ServerDeleted | DetailViewValidationError:
        try:
            result = await self._api.delete(self._api_path, confirmed.item_id)
        except Exception as e:
            logger.exception("Delete request for %s failed", confirmed.item_id)
            return DetailViewValidationError(code="delete_failed", message=str(e))

        if not result.ok:
            logger.error(
                "Delete request for %s rejected (status=%s): %s",
                confirmed.item_id,
                result.status_code,
                result.error,
            )
            return DetailViewValidationError(
                code="delete_failed",
                message=result.error or f"Delete rejected with status {result.status_code}",
            )

        self._stages.append("request")
        return ServerDeleted(item_id=confirmed.item_id, result=result)

    def remove(self, deleted: ServerDeleted) -> StoreUpdated:
        removed = self._store.remove(deleted.item_id)
        self._stages.append("remove")
        return StoreUpdated(item_id=deleted.item_id, removed=removed)

    def navigate(self, updated: StoreUpdated) -> str:
        self._navigator.go_to(self._redirect_route)
        self._stages.append("navigate")
        logger.info("Deleted %s, redirected to %s", updated.item_id, self._redirect_route)
        return self._redirect_route

    async def execute(self, item_id: str) -> DeleteOutput:
        self._stages = []
        confirmed = self.confirm(item_id)
        if confirmed is None:
            return DeleteOutput(outcome="cancelled", completed_stages=(), success=False)

        deleted = await self.request(confirmed)
        if isinstance(deleted, DetailViewValidationError):
            return DeleteOutput(
                outcome="failed",
                completed_stages=tuple(self._stages),
                errors=[deleted],
                success=False,
            )

        updated = self.remove(deleted)
        route = self.navigate(updated)
        return DeleteOutput(
            outcome="deleted",
            completed_stages=tuple(self._stages),
            removed_count=updated.removed,
            redirect_route=route,
            errors=[],
            success=True,
        )
