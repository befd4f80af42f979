"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from services.archive_extractor import TEXT_FILE_EXTENSIONS

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # Environment variable first, then ~/.zipdiff
            config_dir = os.environ.get("ZIPDIFF_CONFIG_DIR")
            if not config_dir:
                config_dir = os.path.expanduser("~/.zipdiff")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                logger.warning(f"Cannot write to {config_dir}: {e}")
                self._config_file = None

            # Fall back to the temp dir if the preferred location is unusable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "zipdiff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                logger.info(f"Using temporary config path: {self._config_file}")

        except OSError as e:
            logger.error(f"Critical error in ConfigManager init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "zipdiff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next call re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            logger.error(f"Ignoring malformed config in {self._config_file}")
            return config

        for key, value in stored.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "comparison": {
                "contextLines": 3,
                "leftLabel": "ZIP 1",
                "rightLabel": "ZIP 2",
                "textExtensions": list(TEXT_FILE_EXTENSIONS),
            },
            "fetch": {
                "timeoutSeconds": 60,
                "maxArchiveBytes": 100 * 1024 * 1024,
                "maxRetries": 3,
            },
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)
