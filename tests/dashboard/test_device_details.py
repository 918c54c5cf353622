#!/usr/bin/env python3
"""
Unit tests for DeviceDetailsView component.
"""

import sys
import os

# Add src to path to allow imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest

from homecore.models import Device
from home_dashboard.components.device_details import DeviceDetailsView


@pytest.fixture
def view(qtbot):
    view = DeviceDetailsView()
    qtbot.addWidget(view)
    return view


class TestDeviceDetailsView:
    """Test suite for DeviceDetailsView"""

    def test_initial_state(self, view):
        assert view.device_id is None
        assert view.control_slider.maximum() == 10

    def test_light_details(self, view):
        light = Device("Desk Lamp", "Light", "Office", is_on=True, control_value=0.8)
        view.set_device(light)

        assert view.title_label.text() == "Desk Lamp Details"
        assert view.status_label.text() == "Light is ON (80%)"
        assert view.control_box.isHidden() is False
        assert view.control_label.text() == "Brightness"
        assert view.control_slider.value() == 8
        assert view.control_slider.isEnabled() is True
        assert view.control_percent_label.text() == "80%"
        assert view.power_switch.isChecked() is True

    def test_fan_label_is_speed(self, view):
        view.set_device(Device("Ceiling Fan", "Fan", "Bedroom", is_on=True))
        assert view.control_label.text() == "Speed"

    def test_uncontrollable_hides_slider(self, view):
        view.set_device(Device("Kitchen AC", "AC", "Kitchen", is_on=True))
        assert view.control_box.isHidden() is True

    def test_slider_disabled_when_off(self, view):
        view.set_device(Device("Desk Lamp", "Light", "Office", is_on=False))
        assert view.control_slider.isEnabled() is False

    def test_slider_emits_normalized_value(self, view):
        light = Device("Desk Lamp", "Light", "Office", is_on=True, control_value=0.8)
        view.set_device(light)
        received = []
        view.control_value_changed.connect(lambda device_id, value: received.append((device_id, value)))

        view.control_slider.setValue(3)

        assert received == [(light.id, pytest.approx(0.3))]

    def test_power_switch_emits(self, view):
        light = Device("Desk Lamp", "Light", "Office", is_on=True)
        view.set_device(light)
        received = []
        view.power_changed.connect(lambda device_id, is_on: received.append((device_id, is_on)))

        view.power_switch.setChecked(False)

        assert received == [(light.id, False)]

    def test_set_device_does_not_emit(self, view):
        received = []
        view.power_changed.connect(lambda *args: received.append(args))
        view.control_value_changed.connect(lambda *args: received.append(args))

        view.set_device(Device("Desk Lamp", "Light", "Office", is_on=True, control_value=0.2))

        assert received == []

    def test_back_button(self, qtbot, view):
        with qtbot.waitSignal(view.back_requested, timeout=1000):
            view.back_btn.click()
