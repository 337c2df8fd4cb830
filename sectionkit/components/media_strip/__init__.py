"""
Media strip component - Horizontal rows with alternating media and hooks.
"""

from ._impl import (
    DEFAULT_MEDIA_STRIP_CONFIG,
    MediaStripConfig,
    MediaStripRenderer,
    compute_placement,
    compute_placements,
    placement_for,
)
from .component import run, run_render
from .models import (
    MediaPlacement,
    MediaStripInput,
    MediaStripOutput,
    MediaStripValidationError,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    # Models
    "MediaPlacement",
    "MediaStripInput",
    "MediaStripOutput",
    "MediaStripValidationError",
    # Ports
    "RulesPort",
    # Renderer and placement
    "DEFAULT_MEDIA_STRIP_CONFIG",
    "MediaStripConfig",
    "MediaStripRenderer",
    "compute_placement",
    "compute_placements",
    "placement_for",
]
