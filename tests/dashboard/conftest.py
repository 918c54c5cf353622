#!/usr/bin/env python3
"""
Pytest configuration and fixtures for dashboard UI tests.

This module provides common fixtures and setup for testing PyQt6 UI components.
Widgets are rendered with the offscreen platform so the suite runs headless.
"""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to path to allow imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
from PyQt6.QtWidgets import QApplication

from homecore.managers import DeviceManager, ConfigManager


@pytest.fixture(scope="session")
def qapp():
    """
    Create a QApplication instance for the test session.

    This fixture ensures only one QApplication exists during the test session,
    which is required for PyQt6 to work properly.
    """
    if QApplication.instance() is None:
        app = QApplication(sys.argv)
        yield app
        app.quit()
    else:
        yield QApplication.instance()


@pytest.fixture
def config_manager(tmp_path):
    """Config manager that only uses the defaults"""
    return ConfigManager(str(tmp_path / "missing.json"))


@pytest.fixture
def device_manager():
    manager = DeviceManager()
    manager.seed_demo_devices()
    return manager
