"""
SQL syntax highlighting.

    >>> from sqlcolor import get_segments, highlight
    >>> [s.name for s in get_segments("SELECT 1")]
    ['keyword', 'default', 'number']
"""

from sqlcolor.core import (
    Category,
    Segment,
    RenderOptions,
    DEFAULT_RENDER_OPTIONS,
    escape_html,
    get_segments,
    highlight,
    render_segments,
)

__version__ = "1.0.0"

__all__ = [
    'Category',
    'Segment',
    'RenderOptions',
    'DEFAULT_RENDER_OPTIONS',
    'escape_html',
    'get_segments',
    'highlight',
    'render_segments',
]
