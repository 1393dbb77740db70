# -*- coding: utf-8 -*-
"""
The GUI Package for Shortyio.

This package contains all user interface components for the application,
built using the PyQt6 framework: the main shortening window and the settings
dialog.
"""

from .main_window import MainWindow
from .settings_dialog import SettingsDialog

__all__ = [
    "MainWindow",
    "SettingsDialog",
]
