# -*- coding: utf-8 -*-
"""
The Utilities Package for Shortyio.

Helpers that support the GUI but do not belong to the link-creation core.

Modules:
- clipboard_manager: Reading the clipboard at startup and copying results.
"""

from .clipboard_manager import copy_to_clipboard, initial_url

__all__ = [
    "copy_to_clipboard",
    "initial_url",
]
