"""
Highlighter settings management.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Callable, Optional

from sqlcolor.core.models import RenderOptions
from sqlcolor.core.renderer import DEFAULT_CLASS_PREFIX, resolve_options


@dataclass
class HighlightSettings:
    """Settings for rendering highlighted SQL."""
    html_mode: bool = False
    class_prefix: str = DEFAULT_CLASS_PREFIX

    # Partial color overrides by category name, merged over the defaults
    colors: dict[str, str] = field(default_factory=dict)
    clear_code: Optional[str] = None

    def to_render_options(self) -> RenderOptions:
        """Build render options from these settings."""
        return resolve_options({
            'html_mode': self.html_mode,
            'class_prefix': self.class_prefix,
            'colors': self.colors,
            'clear_code': self.clear_code,
        })


@dataclass
class EditorSettings:
    """Settings for the Qt editor highlighter."""
    enabled: bool = True
    color_scheme: str = "Default Light"


@dataclass
class ApplicationSettings:
    """Main settings container."""
    highlight: HighlightSettings = field(default_factory=HighlightSettings)
    editor: EditorSettings = field(default_factory=EditorSettings)


class SettingsManager:
    """Manager for loading/saving settings."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = Path(settings_path) if settings_path else self._get_default_path()
        self._settings: Optional[ApplicationSettings] = None
        self._observers: list[Callable[[ApplicationSettings], None]] = []

    @staticmethod
    def _get_default_path() -> Path:
        """Get the default settings file path."""
        if os.name == 'nt':
            # Windows
            app_data = os.environ.get('APPDATA', os.path.expanduser('~'))
            return Path(app_data) / 'SqlColor' / 'settings.json'
        else:
            # Linux/Mac
            config_home = os.environ.get('XDG_CONFIG_HOME',
                                         os.path.expanduser('~/.config'))
            return Path(config_home) / 'sqlcolor' / 'settings.json'

    @property
    def settings(self) -> ApplicationSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> ApplicationSettings:
        """Load settings from disk, falling back to defaults."""
        if not self.settings_path.exists():
            return ApplicationSettings()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return self._from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logging.warning(f"SettingsManager - Could not load {self.settings_path}: {e}")
            return ApplicationSettings()

    def save(self, settings: Optional[ApplicationSettings] = None) -> bool:
        """Save settings to disk."""
        settings = settings or self._settings
        if settings is None:
            return False

        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(self._to_dict(settings), f, indent=2)
        except OSError as e:
            logging.error(f"SettingsManager - Could not save {self.settings_path}: {e}")
            return False

        self._settings = settings
        self._notify_observers()
        return True

    def reset(self) -> ApplicationSettings:
        """Reset to default settings."""
        self._settings = ApplicationSettings()
        self.save()
        return self._settings

    def add_observer(self, callback: Callable[[ApplicationSettings], None]) -> None:
        """Add a callback to be notified of settings changes."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[ApplicationSettings], None]) -> None:
        """Remove a settings change observer."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify_observers(self) -> None:
        for callback in self._observers:
            callback(self._settings)

    def _to_dict(self, settings: ApplicationSettings) -> dict:
        """Convert settings to dictionary for JSON serialization."""
        return asdict(settings)

    def _from_dict(self, data: dict) -> ApplicationSettings:
        """Convert dictionary back to settings objects."""
        highlight_data: dict[str, Any] = data.get('highlight', {}) or {}
        editor_data: dict[str, Any] = data.get('editor', {}) or {}

        highlight = HighlightSettings(
            html_mode=bool(highlight_data.get('html_mode', False)),
            class_prefix=highlight_data.get('class_prefix', DEFAULT_CLASS_PREFIX),
            colors=dict(highlight_data.get('colors', {}) or {}),
            clear_code=highlight_data.get('clear_code'),
        )

        editor = EditorSettings(
            enabled=bool(editor_data.get('enabled', True)),
            color_scheme=editor_data.get('color_scheme', EditorSettings().color_scheme),
        )

        return ApplicationSettings(highlight=highlight, editor=editor)
