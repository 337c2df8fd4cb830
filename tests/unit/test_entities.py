"""
Tests for content entities.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sectionkit.core.entities import (
    BlogItem,
    EventItem,
    PostItem,
    ProductItem,
    Viewer,
    parse_content_item,
    parse_content_items,
)


class TestContentVariants:
    @pytest.mark.parametrize(
        ("kind", "cls"),
        [("post", PostItem), ("blog", BlogItem), ("event", EventItem), ("product", ProductItem)],
    )
    def test_parse_selects_variant(self, kind: str, cls: type) -> None:
        item = parse_content_item({"kind": kind, "id": "1", "title": "T"})

        assert isinstance(item, cls)
        assert item.title == "T"

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_content_item({"kind": "podcast", "id": "1"})

    def test_variant_fields_kept(self) -> None:
        product = parse_content_item({"kind": "product", "id": "1", "price": 9.5, "sku": "A1"})

        assert isinstance(product, ProductItem)
        assert product.price == 9.5

    def test_parse_many(self) -> None:
        items = parse_content_items([{"kind": "post", "id": "a"}, {"kind": "event", "id": "b"}])

        assert [type(i) for i in items] == [PostItem, EventItem]

    def test_non_string_content_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PostItem(id="1", content=["not", "text"])  # type: ignore[arg-type]


class TestSharedFields:
    def test_body_defaults_to_empty(self) -> None:
        assert PostItem(id="1").body == ""

    def test_tag_set(self) -> None:
        assert PostItem(id="1", tags=["a", "b", "a"]).tag_set == frozenset({"a", "b"})

    def test_is_empty(self) -> None:
        assert PostItem().is_empty()
        assert not PostItem(title="x").is_empty()

    def test_viewer_default_is_not_admin(self) -> None:
        assert Viewer().is_admin is False
