"""
Core SQL highlighting engine.

Provides:
- Segment models and categories
- The keyword table and matching rules
- The segment builder (get_segments)
- HTML and terminal rendering (highlight)
"""

from sqlcolor.core.models import (
    Category,
    Match,
    Segment,
    RenderOptions,
)
from sqlcolor.core.keywords import (
    KEYWORDS,
    is_keyword,
)
from sqlcolor.core.escape import escape_html
from sqlcolor.core.rules import (
    Rule,
    DEFAULT_RULES,
    collect_matches,
)
from sqlcolor.core.segmenter import (
    build_segments,
    get_segments,
)
from sqlcolor.core.renderer import (
    DEFAULT_RENDER_OPTIONS,
    highlight,
    render_segments,
    resolve_options,
)

__all__ = [
    # Models
    'Category',
    'Match',
    'Segment',
    'RenderOptions',
    # Keywords
    'KEYWORDS',
    'is_keyword',
    # Escaping
    'escape_html',
    # Rules
    'Rule',
    'DEFAULT_RULES',
    'collect_matches',
    # Segmentation
    'build_segments',
    'get_segments',
    # Rendering
    'DEFAULT_RENDER_OPTIONS',
    'highlight',
    'render_segments',
    'resolve_options',
]
