"""
Application services.

Provides persisted settings for the command line tool and the
editor highlighter.
"""

from sqlcolor.services.settings import (
    ApplicationSettings,
    EditorSettings,
    HighlightSettings,
    SettingsManager,
)

__all__ = [
    'ApplicationSettings',
    'EditorSettings',
    'HighlightSettings',
    'SettingsManager',
]
