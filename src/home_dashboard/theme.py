#!/usr/bin/env python3
"""
Filename: home_dashboard/theme.py
Description: Application stylesheet built from the dashboard configuration
"""

GREY = "#9E9E9E"
DARK_GREY = "#757575"


def build_stylesheet(config):
    """Build the application stylesheet from the configured colours"""
    primary = config["primary_color"]
    background = config["background_color"]
    card = config["card_color"]

    return f"""
        QMainWindow, QWidget#dashboardPage, QWidget#detailsPage, QWidget#gridContainer {{
            background-color: {background};
        }}
        QFrame#appBar {{
            background-color: {primary};
        }}
        QFrame#appBar QLabel, QFrame#appBar QToolButton {{
            color: white;
            background-color: transparent;
            border: none;
        }}
        QLabel#appBarTitle {{
            font-size: 18pt;
            font-weight: 600;
        }}
        QLabel#avatar {{
            background-color: white;
            color: {primary};
            border-radius: 16px;
            min-width: 32px;
            min-height: 32px;
            max-width: 32px;
            max-height: 32px;
        }}
        QFrame#deviceCard {{
            background-color: {card};
            border-radius: 15px;
            border: 1px solid #e0e0e0;
        }}
        QFrame#deviceCard[pressed="true"] {{
            background-color: #e8f1fb;
        }}
        QLabel#cardName {{
            font-size: 14pt;
            font-weight: 600;
        }}
        QPushButton#addDeviceButton {{
            background-color: {primary};
            color: white;
            border: none;
            border-radius: 28px;
            min-width: 56px;
            min-height: 56px;
            font-size: 22pt;
        }}
        QSlider::handle:horizontal {{
            background: {primary};
        }}
        QLabel#snackbar {{
            background-color: #323232;
            color: white;
            padding: 8px;
            border-radius: 4px;
        }}
    """


def status_style(device, primary_color):
    """Text style for a device status label"""
    if device.is_on:
        return f"color: {primary_color}; font-weight: bold;"
    return f"color: {DARK_GREY}; font-weight: normal;"


def icon_style(device, primary_color, size):
    """Text style for a device icon label"""
    color = primary_color if device.is_on else GREY
    return f"color: {color}; font-size: {size}pt;"
