#!/usr/bin/env python3

from PyQt6.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QCheckBox, QSizePolicy
from PyQt6.QtCore import Qt, pyqtSignal

from home_dashboard.theme import status_style, icon_style


class DeviceCard(QFrame):
    """Dashboard card for a single device with a power switch"""

    power_toggled = pyqtSignal(str, bool)  # Emitted with (device id, new power state)
    clicked = pyqtSignal(str)  # Emitted with the device id when the card is tapped

    def __init__(self, device, primary_color="#42A5F5", parent=None):
        super().__init__(parent)
        self.device_id = device.id
        self.primary_color = primary_color
        self.setObjectName("deviceCard")
        self.setProperty("pressed", False)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMinimumHeight(170)

        self._create_widgets()
        self._create_layout()
        self.set_device(device)

    def _create_widgets(self):
        self.icon_label = QLabel()
        self.name_label = QLabel()
        self.name_label.setObjectName("cardName")
        self.status_label = QLabel()

        self.power_switch = QCheckBox()
        self.power_switch.toggled.connect(self._on_power_toggled)

    def _create_layout(self):
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(self.icon_label)
        layout.addWidget(self.name_label)
        layout.addStretch()
        layout.addWidget(self.status_label)

        power_layout = QHBoxLayout()
        power_layout.addWidget(QLabel("Power"))
        power_layout.addStretch()
        power_layout.addWidget(self.power_switch)
        layout.addLayout(power_layout)

        self.setLayout(layout)

    def set_device(self, device):
        """Refresh the card from a device record"""
        self.icon_label.setText(device.icon)
        self.icon_label.setStyleSheet(icon_style(device, self.primary_color, 26))

        # Elide long names to one line
        metrics = self.name_label.fontMetrics()
        self.name_label.setText(metrics.elidedText(device.name, Qt.TextElideMode.ElideRight, 160))
        self.name_label.setToolTip(device.name)

        self.status_label.setText(device.status_text)
        self.status_label.setStyleSheet(status_style(device, self.primary_color))

        self.power_switch.blockSignals(True)
        self.power_switch.setChecked(device.is_on)
        self.power_switch.blockSignals(False)

    def _on_power_toggled(self, checked):
        self.power_toggled.emit(self.device_id, checked)

    def _set_pressed(self, pressed):
        self.setProperty("pressed", pressed)
        self.style().unpolish(self)
        self.style().polish(self)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._set_pressed(True)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        was_pressed = self.property("pressed")
        self._set_pressed(False)
        if (event.button() == Qt.MouseButton.LeftButton and was_pressed
                and self.rect().contains(event.position().toPoint())):
            self.clicked.emit(self.device_id)
        super().mouseReleaseEvent(event)
