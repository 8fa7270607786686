"""
PyQt6 user interface components.

Provides the SQL syntax highlighter used by text editors.
"""

from sqlcolor.ui.sql_highlighter import (
    ColorScheme,
    ColorSchemes,
    SqlSyntaxHighlighter,
    create_highlighter,
    get_available_schemes,
    get_scheme_by_name,
)

__all__ = [
    'ColorScheme',
    'ColorSchemes',
    'SqlSyntaxHighlighter',
    'create_highlighter',
    'get_available_schemes',
    'get_scheme_by_name',
]
