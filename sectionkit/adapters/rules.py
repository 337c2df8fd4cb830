"""
Rules adapter.

Wraps validated SectionRules and satisfies every component RulesPort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sectionkit.rules.loader import load_rules
from sectionkit.rules.models import SectionRules


@dataclass(frozen=True)
class RulesAdapter:
    rules: SectionRules = field(default_factory=SectionRules)

    @classmethod
    def from_file(cls, path: Path) -> RulesAdapter:
        return cls(rules=load_rules(path))

    # Content
    def get_content_length(self) -> int:
        return self.rules.content.default_length

    def get_truncation_marker(self) -> str:
        return self.rules.content.truncation_marker

    def get_read_more_label(self) -> str:
        return self.rules.content.read_more_label

    # Paths
    def get_read_more_path(self) -> str:
        return self.rules.paths.read_more

    def get_api_path(self) -> str:
        return self.rules.paths.api

    def get_redirect_route(self) -> str:
        return self.rules.paths.redirect

    # Filter
    def get_header_tag(self) -> str:
        return self.rules.filter.header_tag

    # Slideshow
    def get_slideshow_interval_ms(self) -> int:
        return self.rules.slideshow.interval_ms

    def get_slideshow_empty_title(self) -> str:
        return self.rules.slideshow.empty_title

    def get_slideshow_empty_message(self) -> str:
        return self.rules.slideshow.empty_message

    # Delete
    def get_confirm_message(self) -> str:
        return self.rules.delete.confirm_message
