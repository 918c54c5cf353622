#!/usr/bin/env python3
"""
Unit tests for DeviceCard component.
"""

import sys
import os

# Add src to path to allow imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
from PyQt6.QtCore import Qt

from homecore.models import Device
from home_dashboard.components.device_card import DeviceCard


@pytest.fixture
def light():
    return Device("Living Room Light", "Light", "Living Room", is_on=True, control_value=0.8)


@pytest.fixture
def card(qtbot, light):
    card = DeviceCard(light)
    qtbot.addWidget(card)
    card.show()
    return card


class TestDeviceCard:
    """Test suite for DeviceCard"""

    def test_card_shows_device(self, card, light):
        assert card.device_id == light.id
        assert card.icon_label.text() == light.icon
        assert card.name_label.toolTip() == "Living Room Light"
        assert card.status_label.text() == "Light is ON (80%)"
        assert card.power_switch.isChecked() is True

    def test_power_switch_emits_id_and_state(self, card, light):
        received = []
        card.power_toggled.connect(lambda device_id, is_on: received.append((device_id, is_on)))

        card.power_switch.setChecked(False)

        assert received == [(light.id, False)]

    def test_set_device_does_not_emit(self, card, light):
        received = []
        card.power_toggled.connect(lambda device_id, is_on: received.append((device_id, is_on)))

        light.is_on = False
        card.set_device(light)

        assert received == []
        assert card.power_switch.isChecked() is False
        assert card.status_label.text() == "Light is OFF"

    def test_click_emits_device_id(self, qtbot, card, light):
        with qtbot.waitSignal(card.clicked, timeout=1000) as blocker:
            qtbot.mouseClick(card, Qt.MouseButton.LeftButton)

        assert blocker.args == [light.id]
        assert card.property("pressed") is False
