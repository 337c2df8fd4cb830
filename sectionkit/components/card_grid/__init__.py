"""
Card grid component - Truncated summary cards with optional read-more links.
"""

from ._impl import DEFAULT_CARD_GRID_CONFIG, CardGridConfig, CardGridRenderer
from .component import run, run_render
from .models import CardGridInput, CardGridOutput, CardGridValidationError
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    # Models
    "CardGridInput",
    "CardGridOutput",
    "CardGridValidationError",
    # Ports
    "RulesPort",
    # Renderer
    "DEFAULT_CARD_GRID_CONFIG",
    "CardGridConfig",
    "CardGridRenderer",
]
