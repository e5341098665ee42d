"""User settings for the red viewer.

Settings are read from a JSON file in the user's config directory. Any
missing or invalid value falls back to the default from EditorConstants.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Settings:
    """Resolved viewer settings."""
    status_fg: RGB = EditorConstants.STATUS_FG_COLOR
    status_bg: RGB = EditorConstants.STATUS_BG_COLOR
    message_timeout: float = EditorConstants.MESSAGE_TIMEOUT


def _parse_rgb(value: Any) -> Optional[RGB]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        return None
    if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
        return None
    return (value[0], value[1], value[2])


def _parse_timeout(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0:
        return None
    return float(value)


class SettingsLoader:
    """Loads settings from ``settings.json`` in the platform config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(EditorConstants.PRODUCT_NAME))
        self._settings_file = self._config_dir / "settings.json"

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_raw(self) -> Dict[str, Any]:
        """Read the settings file.

        Returns:
            The decoded dictionary, or an empty dict if the file does not
            exist or cannot be read.
        """
        if not self._settings_file.exists():
            return {}

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> Settings:
        """Load settings, keeping defaults for absent or invalid keys."""
        data = self._read_raw()
        defaults = Settings()
        values: Dict[str, Any] = {}

        for key in ('status_fg', 'status_bg'):
            if key not in data:
                continue
            rgb = _parse_rgb(data[key])
            if rgb is None:
                logger.warning(f"Invalid colour for {key}: {data[key]!r}, using default")
            else:
                values[key] = rgb

        if 'message_timeout' in data:
            timeout = _parse_timeout(data['message_timeout'])
            if timeout is None:
                logger.warning(f"Invalid message_timeout: {data['message_timeout']!r}, using default")
            else:
                values['message_timeout'] = timeout

        return Settings(
            status_fg=values.get('status_fg', defaults.status_fg),
            status_bg=values.get('status_bg', defaults.status_bg),
            message_timeout=values.get('message_timeout', defaults.message_timeout),
        )


def load_settings(config_dir: Optional[Path] = None) -> Settings:
    """Convenience wrapper around SettingsLoader."""
    return SettingsLoader(config_dir).load()
