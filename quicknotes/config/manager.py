"""
Configuration Manager
======================

Reads the optional settings file: window geometry, list preview length
and logging. Notes themselves are never written to disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads saved settings for Quick Notes."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "window_title": "Quick Notes",
        "window_width": 480,
        "window_height": 640,
        "preview_length": 100,
        "log_level": "INFO",
        "log_file": ""
    }

    @classmethod
    def get_config_file(cls) -> Path:
        """Get the configuration file path (local to the project)."""
        return Path(__file__).parent.parent.parent / "quicknotes_config.json"

    @classmethod
    def load(cls) -> Dict[str, Any]:
        """Load saved configuration.

        Returns:
            Dictionary containing configuration values, with defaults for missing keys
        """
        config_file = cls.get_config_file()
        config = cls.DEFAULT_CONFIG.copy()

        if config_file.exists():
            try:
                saved = json.loads(config_file.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", config_file, e)
            else:
                if isinstance(saved, dict):
                    config.update(
                        {key: value for key, value in saved.items() if key in cls.DEFAULT_CONFIG}
                    )
                else:
                    logger.warning("Ignoring config %s: expected a JSON object", config_file)

        return cls._coerce(config)

    @classmethod
    def _coerce(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """Fall back to the default for any integer setting that is not a positive int."""
        for key in ("window_width", "window_height", "preview_length"):
            value = config[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                config[key] = cls.DEFAULT_CONFIG[key]
        for key in ("window_title", "log_level", "log_file"):
            if not isinstance(config[key], str):
                config[key] = cls.DEFAULT_CONFIG[key]
        return config
