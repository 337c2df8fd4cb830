"""
Media strip component - Rows with deterministic media alternation.

Invariants:
- I1: placement is a pure function of (index, media_left, media_right)
- I2: rows without main_media render no media
- I3: every hook is resolved and invoked during each render pass
- I4: hook exceptions propagate to the caller
- I5: empty items renders the title and the empty message
"""

from __future__ import annotations

from sectionkit.components.hooks import NO_HOOKS, HookSet

from ._impl import MediaStripConfig, MediaStripRenderer
from .models import MediaStripInput, MediaStripOutput, MediaStripValidationError
from .ports import RulesPort


def _build_config(rules: RulesPort | None, inp: MediaStripInput) -> MediaStripConfig:
    """Build strip config from rules port and per-call overrides."""
    base = MediaStripConfig()
    if rules is not None:
        base = MediaStripConfig(
            content_length=rules.get_content_length(),
            truncation_marker=rules.get_truncation_marker(),
            read_more_label=rules.get_read_more_label(),
            path=rules.get_read_more_path(),
        )

    return MediaStripConfig(
        content_length=(
            inp.content_length if inp.content_length is not None else base.content_length
        ),
        truncation_marker=base.truncation_marker,
        read_more_label=base.read_more_label,
        path=inp.path or base.path,
    )


# --- Component Entry Points ---


def run_render(
    inp: MediaStripInput,
    *,
    hooks: HookSet = NO_HOOKS,
    rules: RulesPort | None = None,
) -> MediaStripOutput:
    """
    Render items as media strip rows.

    Args:
        inp: Input containing items, title and layout flags.
        hooks: Render-injection callbacks.
        rules: Optional rules port for configuration.

    Returns:
        MediaStripOutput with rendered HTML and per-row placements.
    """
    if inp.content_length is not None and inp.content_length < 0:
        return MediaStripOutput(
            html="",
            errors=[
                MediaStripValidationError(
                    code="invalid_content_length",
                    message="content_length must be non-negative",
                    field="content_length",
                )
            ],
            success=False,
        )

    renderer = MediaStripRenderer(config=_build_config(rules, inp), hooks=hooks)
    html, placements = renderer.render(
        inp.items,
        inp.title,
        media_left=inp.media_left,
        media_right=inp.media_right,
        clickable_media=inp.clickable_media,
        read_more=inp.read_more,
        empty_message=inp.empty_message,
        class_name=inp.class_name,
    )

    return MediaStripOutput(html=html, placements=placements, errors=[], success=True)


def run(
    inp: MediaStripInput,
    *,
    hooks: HookSet = NO_HOOKS,
    rules: RulesPort | None = None,
) -> MediaStripOutput:
    """Main entry point for the media strip component."""
    if isinstance(inp, MediaStripInput):
        return run_render(inp, hooks=hooks, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
