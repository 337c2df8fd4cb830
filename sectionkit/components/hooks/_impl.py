"""
HookSet - named, optional render-injection points.

Key behaviors:
- Every slot is optional; a missing slot renders as ""
- Callbacks are resolved at render time, never cached
- Callbacks returning None render as ""
- Exceptions raised by callbacks propagate to the caller
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

HookCallback = Callable[..., str | None]

# Section-level hooks take no arguments
STRIP_SECTION_HOOKS = frozenset({"before_title", "after_title", "before_posts", "after_posts"})

# Item-level hooks receive the current item
STRIP_ITEM_HOOKS = frozenset(
    {
        "before_post_title",
        "after_post_title",
        "before_post_media",
        "after_post_media",
        "before_post_content",
        "after_post_content",
        "before_post_link",
        "after_post_link",
    }
)

DETAIL_HOOKS = frozenset(
    {
        "before_post",
        "after_post",
        "before_title",
        "after_title",
        "before_main_media",
        "after_main_media",
        "before_content",
        "after_content",
        "before_comments",
        "after_comments",
        "before_comment_form",
        "after_comment_form",
    }
)

KNOWN_HOOKS = STRIP_SECTION_HOOKS | STRIP_ITEM_HOOKS | DETAIL_HOOKS


class HookSet(Mapping[str, HookCallback]):
    """Immutable mapping of hook name to render callback."""

    def __init__(
        self,
        hooks: Mapping[str, HookCallback] | None = None,
        **named: HookCallback,
    ) -> None:
        merged = {**(hooks or {}), **named}
        unknown = sorted(set(merged) - KNOWN_HOOKS)
        if unknown:
            raise ValueError(f"Unknown hook name(s): {', '.join(unknown)}")
        for name, callback in merged.items():
            if not callable(callback):
                raise ValueError(f"Hook {name!r} is not callable")
        self._hooks = MappingProxyType(merged)

    def __getitem__(self, name: str) -> HookCallback:
        return self._hooks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    def __repr__(self) -> str:
        return f"HookSet({sorted(self._hooks)})"

    def render(self, name: str, *args: Any) -> str:
        """Invoke a hook and return its markup, or "" if the slot is empty."""
        callback = self._hooks.get(name)
        if callback is None:
            return ""
        output = callback(*args)
        return "" if output is None else str(output)

    def bind(self, name: str) -> Callable[[], str]:
        """Zero-argument renderer for a slot, for handing to collaborators."""
        return lambda: self.render(name)


NO_HOOKS = HookSet()
