"""
Content filter component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sectionkit.core.entities import BaseContent, FilterCriteria

# --- Validation Error ---


@dataclass(frozen=True)
class FilterValidationError:
    """Content filter validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FilterInput:
    """Input for selecting a bounded, tag-matching subset."""

    items: Sequence[BaseContent]
    criteria: FilterCriteria


@dataclass(frozen=True)
class FindHeaderInput:
    """Input for locating the designated section header item."""

    items: Sequence[BaseContent]
    header_tag: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class FilterOutput:
    """Output containing the selected items, in input order."""

    items: tuple[BaseContent, ...]
    errors: list[FilterValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class HeaderOutput:
    """Output containing the header item, if any."""

    item: BaseContent | None
    errors: list[FilterValidationError] = field(default_factory=list)
    success: bool = True
