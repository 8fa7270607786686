"""
Renderer for segmented SQL.

Turns segments into either:
- HTML, with each colored segment escaped and wrapped in a span
  carrying a "<prefix><category>" class
- Terminal text, with each colored segment wrapped between its
  color code and the clear code

Caller options are merged over DEFAULT_RENDER_OPTIONS. The colors
table is merged per key, so a partial override keeps the default
codes of every category it does not mention.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from sqlcolor.core.escape import escape_html
from sqlcolor.core.models import Category, RenderOptions, Segment
from sqlcolor.core.segmenter import get_segments


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_CLASS_PREFIX = 'sql-hl-'
DEFAULT_CLEAR_CODE = '\x1b[0m'

DEFAULT_COLORS: Mapping[Category, str] = MappingProxyType({
    Category.KEYWORD: '\x1b[35m',     # Magenta
    Category.FUNCTION: '\x1b[31m',    # Red
    Category.NUMBER: '\x1b[32m',      # Green
    Category.STRING: '\x1b[32m',      # Green
    Category.SPECIAL: '\x1b[33m',     # Yellow
    Category.BRACKET: '\x1b[33m',     # Yellow
    Category.WHITESPACE: '',
})

DEFAULT_RENDER_OPTIONS = RenderOptions(
    html_mode=False,
    escaper=escape_html,
    class_prefix=DEFAULT_CLASS_PREFIX,
    colors=DEFAULT_COLORS,
    clear_code=DEFAULT_CLEAR_CODE,
)

# Accepted option keys, including camelCase spellings
OPTION_ALIASES = {
    'html_mode': 'html_mode',
    'htmlMode': 'html_mode',
    'html': 'html_mode',
    'escaper': 'escaper',
    'html_escaper': 'escaper',
    'htmlEscaper': 'escaper',
    'class_prefix': 'class_prefix',
    'classPrefix': 'class_prefix',
    'colors': 'colors',
    'clear_code': 'clear_code',
    'clearCode': 'clear_code',
}

OptionsLike = Union[RenderOptions, Mapping[str, Any], None]


# =============================================================================
# Option Merging
# =============================================================================

def merge_colors(
    base: Mapping[Category, str],
    overrides: Mapping[Any, Optional[str]],
) -> tuple[dict[Category, str], Optional[str]]:
    """
    Merge a partial colors table over a base table.

    Keys may be Category members or category names; a "clear" key
    carries the clear code. None values keep the base entry.

    Returns:
        Tuple of (merged colors, clear code override or None)
    """
    merged = dict(base)
    clear_code = None

    for key, code in overrides.items():
        if code is None:
            continue
        if isinstance(key, str) and key.lower() == 'clear':
            clear_code = code
            continue
        try:
            category = Category.from_string(key)
        except ValueError:
            logging.debug(f"Renderer - Ignoring color for unknown category {key!r}")
            continue
        merged[category] = code

    return merged, clear_code


def resolve_options(options: OptionsLike = None, **overrides: Any) -> RenderOptions:
    """
    Build the effective render options for one call.

    Precedence, lowest first: DEFAULT_RENDER_OPTIONS, options,
    keyword overrides. Unrecognized keys are ignored.
    """
    if isinstance(options, RenderOptions):
        resolved = options
        layers = [overrides]
    else:
        resolved = DEFAULT_RENDER_OPTIONS
        layers = [options or {}, overrides]

    for layer in layers:
        changes: dict[str, Any] = {}
        explicit_clear = None

        for key, value in layer.items():
            field_name = OPTION_ALIASES.get(key)
            if field_name is None:
                logging.debug(f"Renderer - Ignoring unknown option {key!r}")
                continue
            if value is None:
                continue

            if field_name == 'colors':
                colors, clear_code = merge_colors(
                    changes.get('colors', resolved.colors), value
                )
                changes['colors'] = colors
                if clear_code is not None:
                    changes.setdefault('clear_code', clear_code)
            elif field_name == 'clear_code':
                explicit_clear = value
            elif field_name == 'html_mode':
                changes['html_mode'] = bool(value)
            else:
                changes[field_name] = value

        # A dedicated clear code wins over a "clear" entry in colors
        if explicit_clear is not None:
            changes['clear_code'] = explicit_clear

        if changes:
            resolved = replace(resolved, **changes)

    return resolved


# =============================================================================
# Rendering
# =============================================================================

def render_segment(segment: Segment, options: RenderOptions) -> str:
    """Render a single segment."""
    if not segment.category.is_colored:
        return segment.content

    if options.html_mode:
        escaped = options.escaper(segment.content)
        return f'<span class="{options.class_prefix}{segment.name}">{escaped}</span>'

    return f"{options.color_for(segment.category)}{segment.content}{options.clear_code}"


def render_segments(
    segments: Iterable[Segment],
    options: OptionsLike = None,
    **overrides: Any,
) -> str:
    """Render already computed segments into one string."""
    resolved = resolve_options(options, **overrides)
    return ''.join(render_segment(segment, resolved) for segment in segments)


def highlight(text: str, options: OptionsLike = None, **overrides: Any) -> str:
    """
    Highlight SQL text.

    Args:
        text: Raw SQL
        options: RenderOptions, a mapping of option names, or None
        **overrides: Option names applied on top of options

    Returns:
        HTML when html_mode is set, otherwise color-escaped text

    Example:
        >>> highlight("SELECT 1", colors={"keyword": "<k>", "number": "<n>"}, clear_code="</>")
        '<k>SELECT</> <n>1</>'
    """
    return render_segments(get_segments(text), options, **overrides)
