"""
Text helpers shared by the section renderers.

Key behaviors:
- Character-count truncation (not word-boundary aware, may cut mid-word)
- Marker appended only when truncation happened
- Absent text is treated as empty; non-string text is a caller bug
"""

from __future__ import annotations

import html

DEFAULT_CONTENT_LENGTH = 300
TRUNCATION_MARKER = " . . ."


def escape(text: str | None) -> str:
    """Escape text for use in element bodies and attribute values."""
    return html.escape(text or "")


def truncate_content(
    text: str | None,
    max_length: int = DEFAULT_CONTENT_LENGTH,
    marker: str = TRUNCATION_MARKER,
) -> str:
    """
    Truncate pre-sanitized HTML content for summaries.

    Content at or above max_length is cut to max_length characters,
    stripped, and followed by the marker. Shorter content passes through.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        raise TypeError(f"content must be a string, got {type(text).__name__}")

    if len(text) >= max_length:
        return text[:max_length].strip() + marker
    return text


def strip_paragraph_tags(content: str) -> str:
    """Drop the first <p> and </p> pair, as used for meta descriptions."""
    return content.replace("<p>", "", 1).replace("</p>", "", 1)


def class_names(*names: str | None) -> str:
    """Join non-empty CSS class names."""
    return " ".join(n for n in names if n)
