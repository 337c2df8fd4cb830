"""
Canonical item paths for "read more" and edit links.
"""

from __future__ import annotations

from sectionkit.core.entities import BaseContent


def item_path(template: str, item: BaseContent) -> str:
    """
    Build a link path for an item.

    A template containing placeholders is formatted with {id} and {slug}
    (slug falls back to id). A bare prefix such as "posts" or "/blog/"
    yields "/<prefix>/<slug or id>".
    """
    slug = item.slug or item.id
    if "{" in template:
        return template.format(id=item.id, slug=slug)
    prefix = template.strip("/")
    if not prefix:
        return f"/{slug}"
    return f"/{prefix}/{slug}"


def edit_path(prefix: str | None, item: BaseContent) -> str:
    """Admin edit page for an item: /<prefix>/<id>/edit."""
    base = (prefix or "").strip("/")
    if not base:
        return f"/{item.id}/edit"
    return f"/{base}/{item.id}/edit"


def api_item_path(api_path: str, item_id: str) -> str:
    """Resource URL for CRUD calls: <api_path>/<id>."""
    return f"{api_path.rstrip('/')}/{item_id}"
