"""
Core data models for the SQL highlighter.

This module defines the data structures shared by the segmenter,
the renderer and the UI adapter:
- Segment categories
- Raw match candidates
- Final segments
- Render options

All models are:
- UI-agnostic (the Qt adapter only reads them)
- Immutable (frozen dataclasses, read-only mappings)
- Created fresh per call, never cached
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping


# =============================================================================
# Enumerations
# =============================================================================

class Category(Enum):
    """Category attached to a segment of SQL text."""
    KEYWORD = "keyword"        # Reserved word or phrase
    SPECIAL = "special"        # Single-character operator or punctuation
    FUNCTION = "function"      # Identifier directly followed by '('
    NUMBER = "number"          # Integer or decimal literal
    STRING = "string"          # Quoted literal
    BRACKET = "bracket"        # '(' or ')'
    WHITESPACE = "whitespace"  # Line break
    DEFAULT = "default"        # Unclassified text, never colorized

    @classmethod
    def from_string(cls, value: str) -> 'Category':
        """
        Resolve a category from its value or name.

        Raises:
            ValueError: If no category matches
        """
        if isinstance(value, cls):
            return value
        lowered = str(value).lower()
        for category in cls:
            if category.value == lowered:
                return category
        raise ValueError(f"Unknown category: {value!r}")

    @property
    def is_colored(self) -> bool:
        """Whether segments of this category are transformed on render."""
        return self is not Category.DEFAULT


# =============================================================================
# Segmentation Models
# =============================================================================

@dataclass(frozen=True)
class Match:
    """
    Candidate span produced by a single rule.

    Matches from different rules may overlap; the segment builder
    decides which ones survive.
    """
    category: Category
    start: int      # Offset into the input (inclusive)
    length: int

    @property
    def end(self) -> int:
        """Offset just past the match (exclusive)."""
        return self.start + self.length


@dataclass(frozen=True)
class Segment:
    """
    A categorized, contiguous slice of the input.

    Concatenating the content of all segments of one input
    reproduces that input.
    """
    category: Category
    content: str

    @property
    def name(self) -> str:
        """Category name as used in CSS classes and JSON output."""
        return self.category.value

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {'name': self.name, 'content': self.content}


# =============================================================================
# Rendering Models
# =============================================================================

@dataclass(frozen=True)
class RenderOptions:
    """
    Options controlling how segments are turned into a string.

    colors maps each category to the escape code written before a
    segment; clear_code is written after it.
    """
    html_mode: bool
    escaper: Callable[[str], str]
    class_prefix: str
    colors: Mapping[Category, str] = field(default_factory=dict)
    clear_code: str = ""

    def __post_init__(self):
        # Read-only copy of the caller table
        object.__setattr__(self, 'colors', MappingProxyType(dict(self.colors)))

    def color_for(self, category: Category) -> str:
        """Get the color code for a category, empty if none is configured."""
        return self.colors.get(category, "")
