"""
PyQt6 dashboard for the smart home device list
"""
