"""
Card grid component - Truncated summary cards.

Invariants:
- I1: content shorter than content_length passes through unchanged
- I2: marker appended only when truncation occurred
- I3: read-more link rendered only when enabled
- I4: empty items is not an error; the title still renders
"""

from __future__ import annotations

from ._impl import CardGridConfig, CardGridRenderer
from .models import CardGridInput, CardGridOutput, CardGridValidationError
from .ports import RulesPort


def _id_link_template(path: str) -> str:
    """Card links always address items by id: a bare prefix becomes /<prefix>/{id}."""
    if "{" in path:
        return path
    prefix = path.strip("/")
    return f"/{prefix}/{{id}}" if prefix else "/{id}"


def _build_config(rules: RulesPort | None, inp: CardGridInput) -> CardGridConfig:
    """Build card grid config from rules port and per-call overrides."""
    if rules is None:
        base = CardGridConfig()
    else:
        base = CardGridConfig(
            content_length=rules.get_content_length(),
            truncation_marker=rules.get_truncation_marker(),
            read_more_label=rules.get_read_more_label(),
            read_more_path=_id_link_template(rules.get_read_more_path()),
        )

    return CardGridConfig(
        content_length=(
            inp.content_length if inp.content_length is not None else base.content_length
        ),
        truncation_marker=base.truncation_marker,
        read_more_label=base.read_more_label,
        read_more_path=(
            _id_link_template(inp.read_more_path) if inp.read_more_path else base.read_more_path
        ),
    )


# --- Component Entry Points ---


def run_render(
    inp: CardGridInput,
    *,
    rules: RulesPort | None = None,
) -> CardGridOutput:
    """
    Render items as summary cards.

    Args:
        inp: Input containing items, title and display options.
        rules: Optional rules port for configuration.

    Returns:
        CardGridOutput with rendered HTML.
    """
    if inp.content_length is not None and inp.content_length < 0:
        return CardGridOutput(
            html="",
            errors=[
                CardGridValidationError(
                    code="invalid_content_length",
                    message="content_length must be non-negative",
                    field="content_length",
                )
            ],
            success=False,
        )

    renderer = CardGridRenderer(config=_build_config(rules, inp))
    html = renderer.render(
        inp.items,
        inp.title,
        read_more=inp.read_more,
        class_name=inp.class_name,
    )

    return CardGridOutput(html=html, card_count=len(inp.items), errors=[], success=True)


def run(
    inp: CardGridInput,
    *,
    rules: RulesPort | None = None,
) -> CardGridOutput:
    """Main entry point for the card grid component."""
    if isinstance(inp, CardGridInput):
        return run_render(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
