#!/usr/bin/env python3

import sys
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QStackedWidget,
    QScrollArea,
    QGridLayout,
    QPushButton,
    QToolButton,
    QLabel,
    QFrame,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
)
from PyQt6.QtCore import Qt

from homecore.managers import DeviceManager, ConfigManager
from homecore.logger import log
from home_dashboard.components import DeviceCard, DeviceDetailsView, AddDeviceDialog
from home_dashboard.theme import build_stylesheet

DASHBOARD_PAGE = 0
DETAILS_PAGE = 1


class MainWindow(QMainWindow):
    def __init__(self, config_manager=None, device_manager=None):
        super().__init__()
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.get_config()

        if device_manager is None:
            device_manager = DeviceManager()
            if self.config["seed_demo_devices"]:
                device_manager.seed_demo_devices()
        self.device_manager = device_manager

        self.device_cards = {}  # device id -> DeviceCard
        self.columns = self.config["narrow_columns"]

        self.setWindowTitle(self.config["window_title"])
        self.resize(self.config["window_width"], self.config["window_height"])
        self.setStyleSheet(build_stylesheet(self.config))

        self.pages = QStackedWidget()
        self.pages.addWidget(self._create_dashboard_page())

        self.details_view = DeviceDetailsView(
            primary_color=self.config["primary_color"],
            divisions=self.config["slider_divisions"],
        )
        self.details_view.back_requested.connect(self.show_dashboard)
        self.details_view.power_changed.connect(self.on_power_changed)
        self.details_view.control_value_changed.connect(self.on_control_value_changed)
        self.pages.addWidget(self.details_view)

        self.setCentralWidget(self.pages)
        self.update_device_grid()

    def _create_dashboard_page(self):
        """Create the app bar, the device grid and the add button"""
        page = QWidget()
        page.setObjectName("dashboardPage")
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        app_bar = QFrame()
        app_bar.setObjectName("appBar")
        app_bar_layout = QHBoxLayout()

        self.menu_btn = QToolButton()
        self.menu_btn.setText("☰")
        self.menu_btn.setToolTip("Menu")
        app_bar_layout.addWidget(self.menu_btn)

        title = QLabel(self.config["window_title"])
        title.setObjectName("appBarTitle")
        app_bar_layout.addWidget(title)
        app_bar_layout.addStretch()

        avatar = QLabel("\U0001F464")
        avatar.setObjectName("avatar")
        avatar.setAlignment(Qt.AlignmentFlag.AlignCenter)
        app_bar_layout.addWidget(avatar)

        app_bar.setLayout(app_bar_layout)
        layout.addWidget(app_bar)

        self.grid_container = QWidget()
        self.grid_container.setObjectName("gridContainer")
        self.device_grid = QGridLayout()
        self.device_grid.setContentsMargins(16, 16, 16, 16)
        self.device_grid.setSpacing(16)
        self.device_grid.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.grid_container.setLayout(self.device_grid)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(self.grid_container)
        layout.addWidget(scroll)

        self.addDeviceButton = QPushButton("+")
        self.addDeviceButton.setObjectName("addDeviceButton")
        self.addDeviceButton.setToolTip("Add Device")
        self.addDeviceButton.clicked.connect(self.add_device)

        fab_layout = QHBoxLayout()
        fab_layout.setContentsMargins(16, 8, 16, 16)
        fab_layout.addStretch()
        fab_layout.addWidget(self.addDeviceButton)
        layout.addLayout(fab_layout)

        page.setLayout(layout)
        return page

    @property
    def devices(self):
        return self.device_manager.devices

    def update_device_grid(self):
        """Rebuild the card grid from the device list"""
        while self.device_grid.count():
            item = self.device_grid.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self.device_cards.clear()

        if not self.devices:
            placeholder = QLabel("No Devices\n\nAdd a device to get started")
            placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
            placeholder.setStyleSheet("color: #999999; font-size: 16pt;")
            self.device_grid.addWidget(placeholder, 0, 0)
            return

        for index, device in enumerate(self.device_manager):
            card = DeviceCard(device, primary_color=self.config["primary_color"])
            card.power_toggled.connect(self.on_power_changed)
            card.clicked.connect(self.show_details)
            self.device_cards[device.id] = card
            self.device_grid.addWidget(card, index // self.columns, index % self.columns)

    def refresh_device(self, device_id):
        """Re-render one device on the dashboard and the details page"""
        device = self.device_manager.get_device(device_id)
        if device is None:
            return
        if device_id in self.device_cards:
            self.device_cards[device_id].set_device(device)
        if self.details_view.device_id == device_id:
            self.details_view.set_device(device)

    def add_device(self):
        """Show dialog to add a new device"""
        dialog = AddDeviceDialog(self, message_duration_ms=self.config["message_duration_ms"])
        if dialog.exec():
            data = dialog.get_device_data()
            self.create_device(data['name'], data['type'], data['room'])

    def create_device(self, name, device_type, room):
        device = self.device_manager.add_device(name, device_type, room)
        self.update_device_grid()
        return device

    def on_power_changed(self, device_id, is_on):
        if self.device_manager.set_power(device_id, is_on):
            self.refresh_device(device_id)

    def on_control_value_changed(self, device_id, value):
        self.device_manager.set_control_value(device_id, value)
        # Also snaps the slider back when the change was rejected
        self.refresh_device(device_id)

    def show_details(self, device_id):
        """Navigate to the details page of a device"""
        device = self.device_manager.get_device(device_id)
        if device is None:
            return
        self.details_view.set_device(device)
        self.pages.setCurrentIndex(DETAILS_PAGE)

    def show_dashboard(self):
        self.pages.setCurrentIndex(DASHBOARD_PAGE)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        columns = self.config_manager.columns_for_width(event.size().width())
        if columns != self.columns:
            self.columns = columns
            self.update_device_grid()


def main():
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    window = MainWindow()
    log(f"{window.config['window_title']} started with {len(window.device_manager)} devices", "start")
    window.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
