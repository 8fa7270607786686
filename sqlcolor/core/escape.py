"""
Minimal HTML entity encoding for highlighted output.
"""

from __future__ import annotations

HTML_ENTITIES = {
    '"': '&quot;',
    '&': '&amp;',
    "'": '&#39;',
    '<': '&lt;',
    '>': '&gt;',
}


def escape_html(text: str) -> str:
    """
    Escape the five HTML-sensitive characters in text.

    Unescaped runs between two escape points are copied as slices.
    """
    parts: list[str] = []
    last_index = 0

    for i, char in enumerate(text):
        entity = HTML_ENTITIES.get(char)
        if entity is None:
            continue

        if last_index != i:
            parts.append(text[last_index:i])

        last_index = i + 1
        parts.append(entity)

    if not parts:
        return text

    parts.append(text[last_index:])
    return ''.join(parts)
