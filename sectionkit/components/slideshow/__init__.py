"""
Slideshow component - Timer-driven carousel state machine.
"""

from ._impl import (
    DEFAULT_SLIDESHOW_CONFIG,
    Slideshow,
    SlideshowConfig,
    render_empty,
    render_slides,
)
from .component import create_slideshow, run, run_render
from .models import (
    SlideshowInput,
    SlideshowOutput,
    SlideshowPhase,
    SlideshowState,
    SlideshowValidationError,
)
from .ports import RulesPort, TimerPort

__all__ = [
    # Entry points
    "create_slideshow",
    "run",
    "run_render",
    # Models
    "SlideshowInput",
    "SlideshowOutput",
    "SlideshowPhase",
    "SlideshowState",
    "SlideshowValidationError",
    # Ports
    "RulesPort",
    "TimerPort",
    # State machine
    "DEFAULT_SLIDESHOW_CONFIG",
    "Slideshow",
    "SlideshowConfig",
    "render_empty",
    "render_slides",
]
