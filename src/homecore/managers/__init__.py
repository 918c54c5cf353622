"""
Shared managers used by the dashboard
"""

from .device_manager import DeviceManager
from .config_manager import ConfigManager

__all__ = [
    'DeviceManager',
    'ConfigManager',
]
