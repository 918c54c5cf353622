"""
Filename: homecore/constants.py
Description: Shared constants for the device model and the dashboard
License: MIT
"""

# Device categories offered by the add-device form
DEVICE_TYPES = [
    "Light",
    "Fan",
    "AC",
    "Camera",
]

# Categories with a control value, mapped to the label shown on the slider
CONTROLLABLE_TYPES = {
    "Light": "Brightness",
    "Fan": "Speed",
}

# Glyphs used as device icons
DEVICE_ICONS = {
    "Light": "\U0001F4A1",
    "Fan": "\U0001F300",
    "AC": "\u2744",
    "Camera": "\U0001F3A5",
}
DEFAULT_ICON = "\U0001F50C"

# Control value bounds
CONTROL_MIN = 0.0
CONTROL_MAX = 1.0
DEFAULT_CONTROL_VALUE = 0.5

# Log states
LOG_STATES = {
    "start": "Start",
    "success": "Success",
    "error": "Error",
    "warning": "Warning",
    "info": "Info",
    "debug": "Debug",
}

# Validation
FILL_ALL_FIELDS_MESSAGE = "Please fill all fields!"

# Devices shown on first launch
DEMO_DEVICES = [
    {"name": "Living Room Light", "type": "Light", "room": "Living Room", "is_on": True, "control_value": 0.8},
    {"name": "Bedroom Fan", "type": "Fan", "room": "Bedroom", "is_on": False, "control_value": 0.0},
    {"name": "Kitchen AC", "type": "AC", "room": "Kitchen", "is_on": True},
    {"name": "Front Door Cam", "type": "Camera", "room": "Outside", "is_on": True},
]
