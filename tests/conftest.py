from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from sectionkit.adapters.rules import RulesAdapter
from sectionkit.core.entities import BaseContent, PostItem
from sectionkit.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules_adapter(rules_path: Path) -> RulesAdapter:
    """Adapter over the real project rules file."""
    return RulesAdapter(rules=load_rules(rules_path))


@pytest.fixture
def make_post() -> Callable[..., BaseContent]:
    """Factory for posts with sensible defaults."""

    def _make(item_id: str = "p1", **overrides: Any) -> BaseContent:
        fields: dict[str, Any] = {
            "id": item_id,
            "title": f"Title {item_id}",
            "content": f"<p>Content for {item_id}</p>",
        }
        fields.update(overrides)
        return PostItem(**fields)

    return _make
