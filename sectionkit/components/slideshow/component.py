"""
Slideshow component - Auto-advancing carousel.

Invariants:
- I1: zero items is a valid idle state; no timer is ever created
- I2: at most one active timer per instance (cancel before create)
- I3: manual selection cancels the timer and does not restart it
- I4: teardown cancels any pending timer on every exit path
"""

from __future__ import annotations

from ._impl import Slideshow, SlideshowConfig, render_empty, render_slides
from .models import SlideshowInput, SlideshowOutput, SlideshowValidationError
from .ports import RulesPort, TimerPort


def _build_config(rules: RulesPort | None, inp: SlideshowInput) -> SlideshowConfig:
    """Build slideshow config from rules port and per-call overrides."""
    base = SlideshowConfig()
    if rules is not None:
        base = SlideshowConfig(
            interval_ms=rules.get_slideshow_interval_ms(),
            empty_title=rules.get_slideshow_empty_title(),
            empty_message=rules.get_slideshow_empty_message(),
        )

    return SlideshowConfig(
        interval_ms=inp.interval_ms or base.interval_ms,
        empty_title=inp.empty_title if inp.empty_title is not None else base.empty_title,
        empty_message=inp.empty_message if inp.empty_message is not None else base.empty_message,
    )


def create_slideshow(
    inp: SlideshowInput,
    *,
    timer: TimerPort,
    rules: RulesPort | None = None,
) -> Slideshow:
    """
    Create a slideshow instance (not yet mounted).

    Args:
        inp: Input containing slides and timing overrides.
        timer: Timer source for automatic advances.
        rules: Optional rules port for configuration.

    Returns:
        Slideshow ready to be mounted (or used as a context manager).
    """
    if inp.interval_ms is not None and inp.interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {inp.interval_ms}")
    return Slideshow(inp.items, timer, config=_build_config(rules, inp))


# --- Component Entry Points ---


def run_render(
    inp: SlideshowInput,
    *,
    rules: RulesPort | None = None,
) -> SlideshowOutput:
    """
    Render a static snapshot of a slideshow at inp.current_index.

    Args:
        inp: Input containing slides and the index to show.
        rules: Optional rules port for configuration.

    Returns:
        SlideshowOutput with rendered HTML.
    """
    config = _build_config(rules, inp)

    if not inp.items:
        return SlideshowOutput(html=render_empty(config), current_index=None, phase="idle")

    if not 0 <= inp.current_index < len(inp.items):
        return SlideshowOutput(
            html="",
            current_index=None,
            phase="unmounted",
            errors=[
                SlideshowValidationError(
                    code="index_out_of_range",
                    message=f"current_index {inp.current_index} out of range",
                    field="current_index",
                )
            ],
            success=False,
        )

    return SlideshowOutput(
        html=render_slides(inp.items, inp.current_index),
        current_index=inp.current_index,
        phase="unmounted",
    )


def run(
    inp: SlideshowInput,
    *,
    rules: RulesPort | None = None,
) -> SlideshowOutput:
    """Main entry point for the slideshow component."""
    if isinstance(inp, SlideshowInput):
        return run_render(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
