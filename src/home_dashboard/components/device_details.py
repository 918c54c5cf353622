#!/usr/bin/env python3
"""
Filename: home_dashboard/components/device_details.py
Description: Details screen for one device with a power switch and a brightness/speed slider
"""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QToolButton, QSlider, QCheckBox, QFrame
)
from PyQt6.QtCore import Qt, pyqtSignal

from home_dashboard.theme import status_style, icon_style


class DeviceDetailsView(QWidget):
    """Details page reporting every change back by device id"""

    back_requested = pyqtSignal()
    power_changed = pyqtSignal(str, bool)  # Emitted with (device id, new power state)
    control_value_changed = pyqtSignal(str, float)  # Emitted with (device id, value in [0, 1])

    def __init__(self, parent=None, primary_color="#42A5F5", divisions=10):
        super().__init__(parent)
        self.setObjectName("detailsPage")
        self.device_id = None
        self.primary_color = primary_color
        self.divisions = divisions

        self._create_widgets()
        self._create_layout()

    def _create_widgets(self):
        """Create all UI widgets for the details page"""
        self.back_btn = QToolButton()
        self.back_btn.setText("←")
        self.back_btn.setToolTip("Back")
        self.back_btn.clicked.connect(self.back_requested.emit)

        self.title_label = QLabel()
        self.title_label.setObjectName("appBarTitle")

        self.icon_label = QLabel()
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.control_label = QLabel()
        self.control_label.setStyleSheet("font-size: 14pt; font-weight: 600;")

        self.control_slider = QSlider(Qt.Orientation.Horizontal)
        self.control_slider.setRange(0, self.divisions)
        self.control_slider.setSingleStep(1)
        self.control_slider.setPageStep(1)
        self.control_slider.setTickPosition(QSlider.TickPosition.TicksBelow)
        self.control_slider.valueChanged.connect(self._on_slider_changed)

        self.control_percent_label = QLabel()
        self.control_percent_label.setMinimumWidth(40)

        self.power_switch = QCheckBox("Device Power")
        self.power_switch.toggled.connect(self._on_power_toggled)

    def _create_layout(self):
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)

        app_bar = QFrame()
        app_bar.setObjectName("appBar")
        app_bar_layout = QHBoxLayout()
        app_bar_layout.addWidget(self.back_btn)
        app_bar_layout.addWidget(self.title_label)
        app_bar_layout.addStretch()
        app_bar.setLayout(app_bar_layout)
        main_layout.addWidget(app_bar)

        body_layout = QVBoxLayout()
        body_layout.setContentsMargins(24, 24, 24, 24)
        body_layout.setSpacing(20)
        body_layout.addWidget(self.icon_label)
        body_layout.addWidget(self.status_label)

        # Only shown for lights and fans
        self.control_box = QWidget()
        control_layout = QVBoxLayout()
        control_layout.setContentsMargins(0, 0, 0, 0)
        control_layout.addWidget(self.control_label)
        slider_layout = QHBoxLayout()
        slider_layout.addWidget(self.control_slider)
        slider_layout.addWidget(self.control_percent_label)
        control_layout.addLayout(slider_layout)
        self.control_box.setLayout(control_layout)
        body_layout.addWidget(self.control_box)

        body_layout.addWidget(self.power_switch)
        body_layout.addStretch()

        main_layout.addLayout(body_layout)
        self.setLayout(main_layout)

    def set_device(self, device):
        """Show a device, or refresh it after a change"""
        self.device_id = device.id
        self.title_label.setText(f"{device.name} Details")

        self.icon_label.setText(device.icon)
        self.icon_label.setStyleSheet(icon_style(device, self.primary_color, 72))

        self.status_label.setText(device.status_text)
        self.status_label.setStyleSheet(status_style(device, self.primary_color) + " font-size: 18pt;")

        self.control_box.setVisible(device.is_controllable)
        self.control_label.setText(device.control_label)

        self.control_slider.blockSignals(True)
        self.control_slider.setValue(round(device.control_value * self.divisions))
        self.control_slider.blockSignals(False)
        # Only adjustable while on
        self.control_slider.setEnabled(device.is_on)
        self.control_percent_label.setText(f"{device.control_percent}%")

        self.power_switch.blockSignals(True)
        self.power_switch.setChecked(device.is_on)
        self.power_switch.blockSignals(False)

    def _on_slider_changed(self, position):
        if self.device_id is None:
            return
        self.control_value_changed.emit(self.device_id, position / self.divisions)

    def _on_power_toggled(self, checked):
        if self.device_id is None:
            return
        self.power_changed.emit(self.device_id, checked)
