"""
Content filter component - Bounded, tag-filtered content selection.
"""

from .component import (
    DEFAULT_HEADER_TAG,
    filter_items,
    find_header_item,
    run,
    run_filter,
    run_find_header,
)
from .models import (
    FilterInput,
    FilterOutput,
    FilterValidationError,
    FindHeaderInput,
    HeaderOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_filter",
    "run_find_header",
    # Pure functions
    "DEFAULT_HEADER_TAG",
    "filter_items",
    "find_header_item",
    # Input models
    "FilterInput",
    "FindHeaderInput",
    # Output models
    "FilterOutput",
    "FilterValidationError",
    "HeaderOutput",
    # Ports
    "RulesPort",
]
