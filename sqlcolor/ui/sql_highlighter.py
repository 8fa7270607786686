"""
SQL syntax highlighter for Qt text editors.

Provides:
- Color schemes mapping segment categories to colors
- A QSyntaxHighlighter driven by the segment builder
- CSS generation so HTML output matches the editor colors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from PyQt6.QtGui import (
    QSyntaxHighlighter, QTextDocument, QTextCharFormat,
    QFont, QColor, QTextBlockUserData
)

from sqlcolor.core.models import Category
from sqlcolor.core.renderer import DEFAULT_CLASS_PREFIX
from sqlcolor.core.segmenter import get_segments
from sqlcolor.services.settings import EditorSettings


@dataclass
class ColorScheme:
    """Color scheme for SQL highlighting."""
    name: str
    background: QColor
    foreground: QColor

    # Category colors
    colors: Dict[Category, QColor] = field(default_factory=dict)

    # Category styles
    bold: set[Category] = field(default_factory=set)
    italic: set[Category] = field(default_factory=set)

    def get_format(self, category: Category) -> QTextCharFormat:
        """Get QTextCharFormat for a category."""
        fmt = QTextCharFormat()

        if category in self.colors:
            fmt.setForeground(self.colors[category])
        else:
            fmt.setForeground(self.foreground)

        if category in self.bold:
            fmt.setFontWeight(QFont.Weight.Bold)

        if category in self.italic:
            fmt.setFontItalic(True)

        return fmt

    def to_css(self, class_prefix: str = DEFAULT_CLASS_PREFIX) -> str:
        """
        Build a stylesheet for HTML produced with the same class prefix.

        One rule per colored category, e.g.
        ".sql-hl-keyword { color: #0000c8; font-weight: bold; }"
        """
        rules = []
        for category in Category:
            if not category.is_colored or category not in self.colors:
                continue

            declarations = [f"color: {self.colors[category].name()};"]
            if category in self.bold:
                declarations.append("font-weight: bold;")
            if category in self.italic:
                declarations.append("font-style: italic;")

            rules.append(f".{class_prefix}{category.value} {{ {' '.join(declarations)} }}")

        return '\n'.join(rules)


class ColorSchemes:
    """Predefined color schemes."""

    @staticmethod
    def default_light() -> ColorScheme:
        """Default light color scheme."""
        return ColorScheme(
            name="Default Light",
            background=QColor(255, 255, 255),
            foreground=QColor(0, 0, 0),
            colors={
                Category.KEYWORD: QColor(0, 0, 200),
                Category.FUNCTION: QColor(128, 0, 0),
                Category.NUMBER: QColor(0, 128, 0),
                Category.STRING: QColor(163, 21, 21),
                Category.SPECIAL: QColor(128, 64, 0),
                Category.BRACKET: QColor(90, 90, 90),
            },
            bold={Category.KEYWORD},
        )

    @staticmethod
    def default_dark() -> ColorScheme:
        """Default dark color scheme."""
        return ColorScheme(
            name="Default Dark",
            background=QColor(30, 30, 30),
            foreground=QColor(212, 212, 212),
            colors={
                Category.KEYWORD: QColor(86, 156, 214),
                Category.FUNCTION: QColor(220, 220, 170),
                Category.NUMBER: QColor(181, 206, 168),
                Category.STRING: QColor(206, 145, 120),
                Category.SPECIAL: QColor(212, 212, 212),
                Category.BRACKET: QColor(255, 215, 0),
            },
            bold={Category.KEYWORD},
        )

    @staticmethod
    def terminal() -> ColorScheme:
        """Scheme matching the default terminal escape codes."""
        return ColorScheme(
            name="Terminal",
            background=QColor(0, 0, 0),
            foreground=QColor(229, 229, 229),
            colors={
                Category.KEYWORD: QColor(205, 0, 205),
                Category.FUNCTION: QColor(205, 0, 0),
                Category.NUMBER: QColor(0, 205, 0),
                Category.STRING: QColor(0, 205, 0),
                Category.SPECIAL: QColor(205, 205, 0),
                Category.BRACKET: QColor(205, 205, 0),
            },
        )


class BlockUserData(QTextBlockUserData):
    """Segments found in a text block, kept for later lookups."""

    def __init__(self):
        super().__init__()
        self.tokens: List[Tuple[int, int, Category]] = []  # (start, length, category)


class SqlSyntaxHighlighter(QSyntaxHighlighter):
    """
    Syntax highlighter for SQL.

    Each block (line) is segmented on its own; string literals
    therefore never span lines.
    """

    def __init__(
        self,
        document: QTextDocument,
        color_scheme: Optional[ColorScheme] = None
    ):
        super().__init__(document)

        self._color_scheme = color_scheme or ColorSchemes.default_light()
        self._formats: Dict[Category, QTextCharFormat] = {}
        self._enabled = True

        self._build_formats()

    def _build_formats(self) -> None:
        """Build text formats from color scheme."""
        self._formats.clear()

        for category in Category:
            if category.is_colored:
                self._formats[category] = self._color_scheme.get_format(category)

    @property
    def color_scheme(self) -> ColorScheme:
        return self._color_scheme

    def set_color_scheme(self, scheme: ColorScheme) -> None:
        """Set the color scheme."""
        self._color_scheme = scheme
        self._build_formats()
        logging.debug(f"SqlSyntaxHighlighter - Color scheme set to {scheme.name}")
        self.rehighlight()

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable highlighting."""
        self._enabled = enabled
        self.rehighlight()

    def is_enabled(self) -> bool:
        return self._enabled

    def highlightBlock(self, text: str) -> None:
        """Highlight a block of text."""
        if not self._enabled:
            return

        user_data = BlockUserData()
        position = 0

        for segment in get_segments(text):
            length = len(segment.content)
            fmt = self._formats.get(segment.category)
            if fmt is not None:
                self.setFormat(position, length, fmt)
                user_data.tokens.append((position, length, segment.category))
            position += length

        self.setCurrentBlockUserData(user_data)


def create_highlighter(
    document: QTextDocument,
    settings: Optional[EditorSettings] = None
) -> SqlSyntaxHighlighter:
    """
    Create a highlighter for a document configured from editor settings.
    """
    settings = settings or EditorSettings()
    highlighter = SqlSyntaxHighlighter(document, get_scheme_by_name(settings.color_scheme))
    if not settings.enabled:
        highlighter.set_enabled(False)
    return highlighter


def get_available_schemes() -> List[str]:
    """Get list of available color scheme names."""
    return ["Default Light", "Default Dark", "Terminal"]


def get_scheme_by_name(name: str) -> ColorScheme:
    """Get a color scheme by name, falling back to the light scheme."""
    schemes = {
        "Default Light": ColorSchemes.default_light,
        "Default Dark": ColorSchemes.default_dark,
        "Terminal": ColorSchemes.terminal,
    }

    factory = schemes.get(name)
    if factory is None:
        logging.warning(f"SqlSyntaxHighlighter - Unknown color scheme {name!r}, using Default Light")
        factory = ColorSchemes.default_light
    return factory()
