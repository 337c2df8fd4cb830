"""
Slideshow - Auto-advancing carousel with a cancellable timer.

State machine:
- idle: no items; renders the empty pair, never creates a timer
- cycling: each tick sets current_index = (current_index + 1) % n
- manual: select(k) cancelled the timer and jumped to k; cycling does
  not resume until the slideshow is mounted again
- unmounted: timer released

Every transition that creates a timer cancels the previous one first,
so an instance never owns more than one live timer. Ticks from a
cancelled timer are ignored.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from types import TracebackType

from sectionkit.core.entities import BaseContent
from sectionkit.core.ports import TimerPort
from sectionkit.core.services.text import escape

from .models import SlideshowPhase, SlideshowState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlideshowConfig:
    """Slideshow configuration from rules."""

    interval_ms: int = 5000
    empty_title: str = ""
    empty_message: str = ""


DEFAULT_SLIDESHOW_CONFIG = SlideshowConfig()


# --- Rendering ---


def render_empty(config: SlideshowConfig) -> str:
    return (
        '<section class="section-slideshow">'
        '<div class="section-slideshow__empty">'
        f'<h2 class="heading-secondary">{escape(config.empty_title)}</h2>'
        f'<h3 class="heading-tertiary">{escape(config.empty_message)}</h3>'
        "</div>"
        "</section>"
    )


def render_slides(items: Sequence[BaseContent], current_index: int) -> str:
    slides = []
    buttons = []
    for i, item in enumerate(items):
        slide_class = "slide" if i == current_index else "slide--hidden slide"
        media = (
            f'<img src="{escape(item.main_media)}" alt="{escape(item.title)}">'
            if item.main_media
            else ""
        )
        slides.append(f'<div class="{slide_class}" data-index="{i}">{media}</div>')

        checked = " checked" if i == current_index else ""
        buttons.append(
            f'<input class="section-slideshow__button" type="radio"'
            f' data-index="{i}"{checked}>'
        )

    return (
        '<section class="section-slideshow">'
        + "".join(slides)
        + '<div class="section-slideshow__buttons">'
        + "".join(buttons)
        + "</div>"
        + "</section>"
    )


# --- State Machine ---


class Slideshow:
    """One carousel instance owning at most one repeating timer."""

    def __init__(
        self,
        items: Sequence[BaseContent],
        timer: TimerPort,
        config: SlideshowConfig = DEFAULT_SLIDESHOW_CONFIG,
    ) -> None:
        self._items = tuple(items)
        self._timer = timer
        self._config = config
        self._state: SlideshowState | None = None
        self._generation = 0
        self._unmounted = False

    # --- Introspection ---

    @property
    def items(self) -> tuple[BaseContent, ...]:
        return self._items

    @property
    def phase(self) -> SlideshowPhase:
        if not self._items:
            return "idle"
        if self._unmounted or self._state is None:
            return "unmounted"
        if self._state.timer_handle is not None:
            return "cycling"
        return "manual"

    @property
    def current_index(self) -> int | None:
        return self._state.current_index if self._state is not None else None

    @property
    def has_active_timer(self) -> bool:
        return self._state is not None and self._state.timer_handle is not None

    # --- Timer Management ---

    def _cancel_timer(self) -> None:
        if self._state is None or self._state.timer_handle is None:
            return
        handle = self._state.timer_handle
        self._state.timer_handle = None
        # Invalidate any tick already queued for the old handle
        self._generation += 1
        self._timer.cancel(handle)

    def _start_timer(self) -> None:
        if self._state is None:
            raise RuntimeError("Slideshow is not mounted")
        self._cancel_timer()
        self._generation += 1
        callback = functools.partial(self._on_tick, self._generation)
        self._state.timer_handle = self._timer.schedule_repeating(self._config.interval_ms, callback)

    def _on_tick(self, generation: int) -> None:
        if self._state is None or generation != self._generation:
            logger.debug("Ignoring stale slideshow tick (generation %d)", generation)
            return
        self.advance()

    # --- Transitions ---

    def mount(self) -> None:
        """Enter cycling from slide 0. A no-op for an empty slideshow."""
        if not self._items:
            logger.debug("Slideshow has no items; staying idle")
            return

        self._cancel_timer()
        self._unmounted = False
        self._state = SlideshowState(current_index=0)
        self._start_timer()
        logger.info(
            "Slideshow mounted with %d slides (interval %dms)",
            len(self._items),
            self._config.interval_ms,
        )

    def advance(self) -> int:
        """Move to the next slide, wrapping at the end."""
        if self._state is None:
            raise RuntimeError("Slideshow is not mounted")
        self._state.current_index = (self._state.current_index + 1) % len(self._items)
        return self._state.current_index

    def select(self, index: int) -> None:
        """Jump to a slide by hand. Stops automatic cycling."""
        if self._state is None:
            raise RuntimeError("Slideshow is not mounted")
        if not 0 <= index < len(self._items):
            raise IndexError(f"Slide index {index} out of range for {len(self._items)} slides")

        self._cancel_timer()
        self._state.current_index = index
        logger.debug("Slideshow manually moved to slide %d", index)

    def unmount(self) -> None:
        """Release the timer. Safe to call more than once."""
        self._cancel_timer()
        if self._state is not None:
            logger.info("Slideshow unmounted")
        self._state = None
        self._unmounted = True

    def __enter__(self) -> Slideshow:
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    # --- Rendering ---

    def render(self) -> str:
        if not self._items:
            return render_empty(self._config)
        index = self._state.current_index if self._state is not None else 0
        return render_slides(self._items, index)
