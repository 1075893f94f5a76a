"""
Configuration Manager - Persist merge engine settings
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "MERGE_ENGINE_CONFIG_DIR"


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None

    def __init__(self, config_dir: str | os.PathLike | None = None):
        self._config_file = self._resolve_config_file(config_dir)
        self._config = self._load_config()

    @staticmethod
    def _resolve_config_file(config_dir: str | os.PathLike | None) -> Path:
        # Explicit argument, then environment, then home directory
        config_dir = config_dir or os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.merge_engine")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            return config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)

        # Last resort: system temp directory
        tmp_dir = Path(tempfile.gettempdir()) / "merge_engine"
        tmp_dir.mkdir(parents=True, exist_ok=True)
        logger.warning("Using temporary config path: %s", tmp_dir / "config.json")
        return tmp_dir / "config.json"

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, on top of the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config: %s", e)
            return config

        if not isinstance(stored, dict):
            logger.error("Ignoring config file %s: expected a JSON object", self._config_file)
            return config

        for key, value in stored.items():
            if isinstance(config.get(key), dict):
                if not isinstance(value, dict):
                    logger.warning("Ignoring config section %r: expected a JSON object", key)
                    continue
                config[key] = {**config[key], **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            # Unchanged segments always start accepted
            "code": {"acceptAdded": True, "acceptRemoved": False},
            "text": {"acceptAdded": True, "acceptRemoved": False},
            "sessions": {"maxSessions": 100},
            "logLevel": "INFO",
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        # Ensure config directory exists
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        # Write to file
        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)
