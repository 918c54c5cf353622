"""
Shared models for the smart home dashboard
"""

import uuid
from typing import List, Dict, Any
from dataclasses import dataclass, field, asdict

from .constants import (
    DEVICE_TYPES,
    CONTROLLABLE_TYPES,
    DEVICE_ICONS,
    DEFAULT_ICON,
    CONTROL_MIN,
    CONTROL_MAX,
    DEFAULT_CONTROL_VALUE,
    FILL_ALL_FIELDS_MESSAGE,
)


def clamp_control_value(value: float) -> float:
    """Clamp a control value into [0.0, 1.0]"""
    return max(CONTROL_MIN, min(CONTROL_MAX, float(value)))


def new_device_id() -> str:
    return str(uuid.uuid4())


class DeviceValidationError(ValueError):
    """Raised when a new device is missing required fields"""

    def __init__(self, errors: List[str]):
        super().__init__(FILL_ALL_FIELDS_MESSAGE)
        self.errors = errors


def validate_device_fields(name: str, device_type: str, room: str) -> List[str]:
    """Check the add-device fields, returning a list of error messages"""
    errors = []
    if not name or not name.strip():
        errors.append("Device name cannot be empty.")
    if not device_type:
        errors.append("Device type must be selected.")
    elif device_type not in DEVICE_TYPES:
        errors.append(f"Unknown device type '{device_type}'.")
    if not room or not room.strip():
        errors.append("Room name cannot be empty.")
    return errors


@dataclass
class Device:
    """A simulated smart home device"""
    name: str
    type: str
    room: str
    is_on: bool = False
    control_value: float = DEFAULT_CONTROL_VALUE  # brightness or speed
    id: str = field(default_factory=new_device_id)

    def __post_init__(self):
        self.control_value = clamp_control_value(self.control_value)

    def __setattr__(self, name, value):
        # id is assigned once, in __init__
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Device id cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def is_controllable(self) -> bool:
        return self.type in CONTROLLABLE_TYPES

    @property
    def control_label(self) -> str:
        """Label for the control value, e.g. Brightness for a light"""
        return CONTROLLABLE_TYPES.get(self.type, "")

    @property
    def control_percent(self) -> int:
        return int(self.control_value * 100)

    @property
    def icon(self) -> str:
        return DEVICE_ICONS.get(self.type, DEFAULT_ICON)

    @property
    def status_text(self) -> str:
        """Current status, e.g. "Light is ON (80%)" or "Fan is OFF" """
        if not self.is_on:
            return f"{self.type} is OFF"
        if self.is_controllable:
            return f"{self.type} is ON ({self.control_percent}%)"
        return f"{self.type} is ON"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
