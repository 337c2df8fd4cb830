"""
Slideshow component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from sectionkit.core.entities import BaseContent

# --- Validation Error ---


@dataclass(frozen=True)
class SlideshowValidationError:
    """Slideshow validation error."""

    code: str
    message: str
    field: str | None = None


# --- State ---

# idle: no items, terminal, never has a timer
# cycling: one active repeating timer
# manual: a slide was picked by hand; the timer is gone until remount
# unmounted: not mounted yet, or torn down with the timer released
SlideshowPhase = Literal["idle", "cycling", "manual", "unmounted"]


@dataclass(frozen=False)
class SlideshowState:
    """
    Mutable per-instance slideshow state.

    Invariants:
    - I1: 0 <= current_index < item count
    - I2: at most one live timer_handle
    """

    current_index: int = 0
    timer_handle: object | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SlideshowInput:
    """Input for building or rendering a slideshow."""

    items: Sequence[BaseContent]
    interval_ms: int | None = None  # None uses the configured interval
    empty_title: str | None = None
    empty_message: str | None = None
    current_index: int = 0


# --- Output Models ---


@dataclass(frozen=True)
class SlideshowOutput:
    """Output containing rendered slideshow HTML."""

    html: str
    current_index: int | None = None
    phase: SlideshowPhase = "idle"
    errors: list[SlideshowValidationError] = field(default_factory=list)
    success: bool = True
