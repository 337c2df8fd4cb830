"""
Content filter component - Bounded, tag-filtered content selection.

Invariants:
- I1: len(result) <= criteria.max_items
- I2: every result item's tags are a superset of criteria.required_tags
- I3: relative input order is preserved
- I4: pure and idempotent; empty input or no match yields ()
"""

from __future__ import annotations

from collections.abc import Iterable

from sectionkit.core.entities import BaseContent, FilterCriteria

from .models import FilterInput, FilterOutput, FindHeaderInput, HeaderOutput
from .ports import RulesPort

DEFAULT_HEADER_TAG = "section-header"


def filter_items(
    items: Iterable[BaseContent],
    criteria: FilterCriteria,
) -> tuple[BaseContent, ...]:
    """Select up to max_items items carrying every required tag."""
    if criteria.max_items == 0:
        return ()

    selected: list[BaseContent] = []
    for item in items:
        if criteria.required_tags <= item.tag_set:
            selected.append(item)
            if len(selected) >= criteria.max_items:
                break
    return tuple(selected)


def find_header_item(
    items: Iterable[BaseContent],
    header_tag: str = DEFAULT_HEADER_TAG,
) -> BaseContent | None:
    """First item tagged as the section header, or None."""
    matches = filter_items(items, FilterCriteria(max_items=1, required_tags=frozenset({header_tag})))
    return matches[0] if matches else None


# --- Component Entry Points ---


def run_filter(inp: FilterInput) -> FilterOutput:
    """
    Filter content by tag with an upper bound.

    Args:
        inp: Input containing items and criteria.

    Returns:
        FilterOutput with the selected items.
    """
    return FilterOutput(items=filter_items(inp.items, inp.criteria), errors=[], success=True)


def run_find_header(
    inp: FindHeaderInput,
    *,
    rules: RulesPort | None = None,
) -> HeaderOutput:
    """
    Locate the section header item.

    Args:
        inp: Input containing items and an optional tag override.
        rules: Optional rules port supplying the header tag.

    Returns:
        HeaderOutput with the item, or None when nothing is tagged.
    """
    tag = inp.header_tag or (rules.get_header_tag() if rules else DEFAULT_HEADER_TAG)
    return HeaderOutput(item=find_header_item(inp.items, tag), errors=[], success=True)


def run(
    inp: FilterInput | FindHeaderInput,
    *,
    rules: RulesPort | None = None,
) -> FilterOutput | HeaderOutput:
    """
    Main entry point for the content filter component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, FilterInput):
        return run_filter(inp)
    elif isinstance(inp, FindHeaderInput):
        return run_find_header(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
