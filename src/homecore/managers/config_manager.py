"""
Configuration management for the smart home dashboard
"""

import json
import os
from typing import Dict, Any

from ..logger import log


class ConfigManager:
    """Manages dashboard configuration with optional file-based overrides and defaults"""

    DEFAULT_CONFIG = {
        "window_title": "Smart Home Dashboard",
        "window_width": 420,
        "window_height": 760,
        "wide_layout_breakpoint": 600,
        "narrow_columns": 2,
        "wide_columns": 3,
        "slider_divisions": 10,
        "message_duration_ms": 4000,
        "seed_demo_devices": True,
        "primary_color": "#42A5F5",
        "background_color": "#F0F4F8",
        "card_color": "#FFFFFF",
    }

    def __init__(self, config_file: str = None):
        if config_file is None:
            # Default to config.json in the same directory as this module
            self.config_file = os.path.join(os.path.dirname(__file__), "config.json")
        else:
            self.config_file = config_file
        self._config = None

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults"""
        if self._config is not None:
            return self._config

        config = self.DEFAULT_CONFIG.copy()

        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r') as f:
                    file_config = json.load(f)
                    # File config takes precedence over defaults
                    if "dashboard" in file_config:
                        config.update(file_config["dashboard"])
                    else:
                        config.update(file_config)
        except (OSError, json.JSONDecodeError) as e:
            log(f"Could not load config file {self.config_file}: {e}", "warning")
            log("Using default configuration", "info")

        self._config = config
        return config

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration"""
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_config().get(key, default)

    def columns_for_width(self, width: int) -> int:
        """Number of grid columns for a given window width"""
        config = self.load_config()
        if width > config["wide_layout_breakpoint"]:
            return config["wide_columns"]
        return config["narrow_columns"]
