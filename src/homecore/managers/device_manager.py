"""
Owner of the in-memory device list
"""

from dataclasses import replace
from typing import List, Optional

from ..constants import DEMO_DEVICES
from ..logger import log
from ..models import (
    Device,
    DeviceValidationError,
    clamp_control_value,
    new_device_id,
    validate_device_fields,
)


class DeviceManager:
    """Holds the device list and applies every mutation to it by device id"""

    def __init__(self, devices: Optional[List[Device]] = None):
        self._devices: List[Device] = []
        for device in devices or []:
            self._insert(device)

    def __len__(self):
        return len(self._devices)

    def __iter__(self):
        return iter(self._devices)

    @property
    def devices(self) -> List[Device]:
        """Snapshot of the device list in insertion order"""
        return list(self._devices)

    def _insert(self, device: Device):
        if self.get_device(device.id) is not None:
            raise ValueError(f"Duplicate device id '{device.id}'")
        self._devices.append(device)

    def _unused_id(self) -> str:
        device_id = new_device_id()
        while self.get_device(device_id) is not None:
            device_id = new_device_id()
        return device_id

    def get_device(self, device_id: str) -> Optional[Device]:
        """Get a device by ID"""
        for device in self._devices:
            if device.id == device_id:
                return device
        return None

    def add_device(self, name: str, device_type: str, room: str) -> Device:
        """Append a new device, powered off, and return it"""
        errors = validate_device_fields(name, device_type, room)
        if errors:
            log(f"Rejected new device: {'; '.join(errors)}", "warning")
            raise DeviceValidationError(errors)

        device = Device(
            name=name.strip(),
            type=device_type,
            room=room.strip(),
            is_on=False,
            id=self._unused_id(),
        )
        self._devices.append(device)
        log(f"Added {device.type} '{device.name}' in {device.room}", "success")
        return device

    def set_power(self, device_id: str, is_on: bool) -> bool:
        """Set the power state of a device, returns False if the id is unknown"""
        device = self.get_device(device_id)
        if device is None:
            return False

        device.is_on = bool(is_on)
        if not device.is_on and device.is_controllable:
            device.control_value = 0.0
        log(f"{device.name}: {device.status_text}", "info")
        return True

    def toggle_power(self, device_id: str) -> bool:
        device = self.get_device(device_id)
        if device is None:
            return False
        return self.set_power(device_id, not device.is_on)

    def set_control_value(self, device_id: str, value: float) -> bool:
        """Set brightness or speed, ignored while the device is off"""
        device = self.get_device(device_id)
        if device is None or not device.is_on:
            return False

        device.control_value = clamp_control_value(value)
        log(f"{device.name}: {device.control_label or 'control'} set to {device.control_percent}%", "debug")
        return True

    def update_device(self, updated: Device) -> bool:
        """Replace the device with the same id, last write wins"""
        errors = validate_device_fields(updated.name, updated.type, updated.room)
        if errors:
            log(f"Rejected update of {updated.id}: {'; '.join(errors)}", "warning")
            raise DeviceValidationError(errors)

        for i, device in enumerate(self._devices):
            if device.id == updated.id:
                replacement = replace(updated)
                if device.is_on and not replacement.is_on and replacement.is_controllable:
                    replacement.control_value = 0.0
                self._devices[i] = replacement
                return True
        return False

    def seed_demo_devices(self):
        """Add the demo devices shown on first launch"""
        for data in DEMO_DEVICES:
            self._insert(Device(id=self._unused_id(), **data))
        log(f"Loaded {len(DEMO_DEVICES)} demo devices", "info")
