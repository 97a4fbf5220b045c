"""
Configuration Manager - Handle viewer settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from services.diff_engine import ALGORITHMS

THEMES = ("light", "dark")


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1st: environment variable
            config_dir = os.environ.get("CODE_DIFF_VIEWER_CONFIG_DIR")

            # 2nd: home directory ~/.code_diff_viewer
            if not config_dir:
                config_dir = os.path.expanduser("~/.code_diff_viewer")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                self._config_file = None

            # 3rd: temp dir when the preferred path is not writable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "code_diff_viewer"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "code_diff_viewer_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Forget the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, layered over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return config

        for key, value in stored.items():
            default = config.get(key)
            if default is not None and isinstance(value, dict) != isinstance(default, dict):
                print(f"[ConfigManager] Ignoring malformed '{key}' in {self._config_file}")
                continue
            if isinstance(value, dict) and isinstance(default, dict):
                config[key] = {**default, **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "theme": "light",
            "diff": {"algorithm": "myers"},
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        # Ensure config directory exists
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

    def get_theme(self) -> str:
        theme = self.get_config().get("theme", "light")
        return theme if isinstance(theme, str) and theme in THEMES else "light"

    def set_theme(self, theme: str):
        """Persist the theme; raises ValueError for unknown themes"""
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r} (expected one of {', '.join(THEMES)})")
        self.set("theme", theme)

    def toggle_theme(self) -> str:
        """Switch between light and dark, returning the new theme"""
        theme = "light" if self.get_theme() == "dark" else "dark"
        self.set_theme(theme)
        return theme

    def get_algorithm(self) -> str:
        algorithm = self.get_config().get("diff", {}).get("algorithm", "myers")
        return algorithm if isinstance(algorithm, str) else "myers"

    def set_algorithm(self, algorithm: str):
        """Persist the default diff algorithm; raises ValueError for unknown names"""
        if algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown diff algorithm: {algorithm!r} (expected one of {', '.join(ALGORITHMS)})"
            )
        diff_config = self.get_config().get("diff", {})
        self.set("diff", {**diff_config, "algorithm": algorithm})
