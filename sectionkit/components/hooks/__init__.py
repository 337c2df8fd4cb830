"""
Hooks component - Named render-injection points for section renderers.
"""

from ._impl import (
    DETAIL_HOOKS,
    KNOWN_HOOKS,
    NO_HOOKS,
    STRIP_ITEM_HOOKS,
    STRIP_SECTION_HOOKS,
    HookCallback,
    HookSet,
)

__all__ = [
    "DETAIL_HOOKS",
    "KNOWN_HOOKS",
    "NO_HOOKS",
    "STRIP_ITEM_HOOKS",
    "STRIP_SECTION_HOOKS",
    "HookCallback",
    "HookSet",
]
