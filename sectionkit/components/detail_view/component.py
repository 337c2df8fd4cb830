"""
Detail view component - Single item rendering with owner-gated actions.

Invariants:
- I1: absent or empty item renders only the empty title/message pair
- I2: tags and edit/delete controls render only for admin viewers
- I3: page title is composite only when a header item exists and the item has a title
- I4: delete never mutates the store before the API succeeds
- I5: delete never navigates before the store is updated
- I6: delete failures are logged and contained, never raised
"""

from __future__ import annotations

from sectionkit.components.hooks import NO_HOOKS, HookSet

from ._impl import DeleteFlow, DetailConfig, DetailViewRenderer, build_page_head
from .models import DeleteInput, DeleteOutput, DetailViewInput, DetailViewOutput
from .ports import (
    ApiClientPort,
    CommentRendererPort,
    ConfirmPromptPort,
    ContentStorePort,
    NavigatorPort,
    RulesPort,
)


def _build_config(rules: RulesPort | None) -> DetailConfig:
    """Build detail view config from rules port."""
    if rules is None:
        return DetailConfig()

    return DetailConfig(
        header_tag=rules.get_header_tag(),
        api_path=rules.get_api_path(),
        redirect_route=rules.get_redirect_route(),
        confirm_message=rules.get_confirm_message(),
    )


# --- Component Entry Points ---


def run_render(
    inp: DetailViewInput,
    *,
    hooks: HookSet = NO_HOOKS,
    comments: CommentRendererPort | None = None,
    rules: RulesPort | None = None,
) -> DetailViewOutput:
    """
    Render one item in full.

    Args:
        inp: Input containing the item, viewer, options and all items.
        hooks: Render-injection callbacks.
        comments: Optional comment renderer the thread is delegated to.
        rules: Optional rules port for configuration.

    Returns:
        DetailViewOutput with rendered HTML and page head metadata.
    """
    config = _build_config(rules)
    renderer = DetailViewRenderer(config=config, hooks=hooks, comments=comments)

    if inp.item is None or inp.item.is_empty():
        return DetailViewOutput(
            html=renderer.render_empty(inp.options),
            page_head=None,
            is_empty=True,
            errors=[],
            success=True,
        )

    html = renderer.render(inp.item, inp.viewer, inp.options)
    page_head = build_page_head(inp.item, inp.all_items, config.header_tag)

    return DetailViewOutput(html=html, page_head=page_head, is_empty=False, errors=[], success=True)


async def run_delete(
    inp: DeleteInput,
    *,
    prompt: ConfirmPromptPort,
    api: ApiClientPort,
    store: ContentStorePort,
    navigator: NavigatorPort,
    rules: RulesPort | None = None,
) -> DeleteOutput:
    """
    Delete an item: confirm, call the API, update the store, navigate.

    Args:
        inp: Input containing the item id and routing overrides.
        prompt: Blocking confirmation prompt.
        api: API client issuing the DELETE.
        store: Externally owned content collection.
        navigator: Client navigator.
        rules: Optional rules port for defaults.

    Returns:
        DeleteOutput describing the outcome and completed stages.
    """
    config = _build_config(rules)
    flow = DeleteFlow(
        prompt=prompt,
        api=api,
        store=store,
        navigator=navigator,
        api_path=inp.api_path or config.api_path,
        redirect_route=inp.redirect_route or config.redirect_route,
        confirm_message=inp.confirm_message or config.confirm_message,
    )
    return await flow.execute(inp.item_id)


def run(
    inp: DetailViewInput,
    *,
    hooks: HookSet = NO_HOOKS,
    comments: CommentRendererPort | None = None,
    rules: RulesPort | None = None,
) -> DetailViewOutput:
    """
    Main entry point for the detail view component.

    Deletes are asynchronous and go through run_delete.
    """
    if isinstance(inp, DetailViewInput):
        return run_render(inp, hooks=hooks, comments=comments, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
