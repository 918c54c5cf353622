#!/usr/bin/env python3

from PyQt6.QtWidgets import (
    QDialog, QDialogButtonBox, QFormLayout, QLineEdit, QComboBox, QLabel
)
from PyQt6.QtCore import Qt, QTimer

from homecore.constants import DEVICE_TYPES, FILL_ALL_FIELDS_MESSAGE
from homecore.models import validate_device_fields
from homecore.logger import log


class AddDeviceDialog(QDialog):
    """Dialog for adding a new device, which always starts powered off"""

    def __init__(self, parent=None, message_duration_ms=4000):
        super().__init__(parent)
        self.setWindowTitle("Add New Device")
        self.setModal(True)

        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowMaximizeButtonHint
        )

        layout = QFormLayout()

        self.name_field = QLineEdit()
        self.name_field.setPlaceholderText("e.g., Living Room Light")
        layout.addRow("Device Name:", self.name_field)

        self.room_field = QLineEdit()
        self.room_field.setPlaceholderText("e.g., Living Room")
        layout.addRow("Room Name:", self.room_field)

        self.type_combo = QComboBox()
        self.type_combo.addItems(DEVICE_TYPES)
        self.type_combo.setPlaceholderText("Select a type")
        self.type_combo.setCurrentIndex(-1)
        layout.addRow("Device Type:", self.type_combo)

        # Transient validation message
        self.message_label = QLabel()
        self.message_label.setObjectName("snackbar")
        self.message_label.hide()
        layout.addRow(self.message_label)

        self.message_timer = QTimer(self)
        self.message_timer.setSingleShot(True)
        self.message_timer.setInterval(message_duration_ms)
        self.message_timer.timeout.connect(self.message_label.hide)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        self.add_button = buttons.addButton("Add", QDialogButtonBox.ButtonRole.AcceptRole)
        buttons.accepted.connect(self.validate_and_accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

        self.setLayout(layout)

    def selected_type(self):
        """Currently selected device type, or None"""
        if self.type_combo.currentIndex() < 0:
            return None
        return self.type_combo.currentText()

    def show_message(self, message):
        self.message_label.setText(message)
        self.message_label.show()
        self.message_timer.start()

    def validate_and_accept(self):
        """Validate inputs before accepting"""
        data = self.get_device_data()
        errors = validate_device_fields(data['name'], data['type'], data['room'])
        if errors:
            log(f"Add device form incomplete: {'; '.join(errors)}", "debug")
            self.show_message(FILL_ALL_FIELDS_MESSAGE)
            return

        self.accept()

    def get_device_data(self):
        return {
            'name': self.name_field.text().strip(),
            'type': self.selected_type(),
            'room': self.room_field.text().strip(),
        }
