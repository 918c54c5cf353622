#!/usr/bin/env python3
"""
Unit tests for ConfigManager.
"""

import sys
import os
import json

# Add src to path to allow imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest

from homecore.managers import ConfigManager


class TestConfigManager:
    """Test suite for ConfigManager"""

    def test_defaults_without_file(self, tmp_path):
        manager = ConfigManager(str(tmp_path / "config.json"))
        config = manager.get_config()
        assert config == ConfigManager.DEFAULT_CONFIG
        assert config is not ConfigManager.DEFAULT_CONFIG

    def test_dashboard_section_overrides(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"dashboard": {"wide_columns": 4, "primary_color": "#000000"}}))

        config = ConfigManager(str(config_file)).get_config()
        assert config["wide_columns"] == 4
        assert config["primary_color"] == "#000000"
        assert config["narrow_columns"] == 2

    def test_flat_file_overrides(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"seed_demo_devices": False}))

        assert ConfigManager(str(config_file)).get("seed_demo_devices") is False

    def test_invalid_json_falls_back(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        config = ConfigManager(str(config_file)).get_config()
        assert config == ConfigManager.DEFAULT_CONFIG
        assert "[Warning]" in capsys.readouterr().out

    def test_config_cached(self, tmp_path):
        manager = ConfigManager(str(tmp_path / "config.json"))
        assert manager.get_config() is manager.get_config()

    @pytest.mark.parametrize("width,columns", [
        (320, 2),
        (600, 2),
        (601, 3),
        (1200, 3),
    ])
    def test_columns_for_width(self, tmp_path, width, columns):
        manager = ConfigManager(str(tmp_path / "config.json"))
        assert manager.columns_for_width(width) == columns
