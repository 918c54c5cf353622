"""
Filename: homecore/logger.py
Description: Logger for the dashboard, handles logging to the console and an optional handler
License: MIT
"""

import datetime

from .constants import LOG_STATES

# Global log handler reference
_log_handler = None


def set_log_handler(handler):
    """Set the global log handler, called with (message, state) for every log line"""
    global _log_handler
    _log_handler = handler


def log(message, state="info"):
    """
    Logs a message to the console with a timestamp and forwards it to the log handler.

    Parameters:
    message (str): The message to log.
    state (str): The state of the message (must be one of LOG_STATES keys).
    """
    if state not in LOG_STATES:
        state = "info"  # Default to info if invalid state

    timestamp = datetime.datetime.now().strftime('%H:%M:%S')
    formatted_message = f"[{timestamp}] [{LOG_STATES[state]}] {message}"

    print(formatted_message)

    if _log_handler:
        _log_handler(message, state)
