from .device_card import DeviceCard
from .device_details import DeviceDetailsView
from .add_device_dialog import AddDeviceDialog

__all__ = [
    'DeviceCard',
    'DeviceDetailsView',
    'AddDeviceDialog',
]
