"""
Filename: homecore/__init__.py
Description: Core library for the smart home dashboard, contains the device model, constants, logger and managers
License: MIT
"""

from .constants import *
from .models import *
from .managers import *

# Single source of truth for version number
__version__ = "1.0.0"

# Version info for easy access
VERSION = __version__
