# -*- coding: utf-8 -*-
"""
src/shortyio/utils/clipboard_manager.py

A simple wrapper utility for interacting with the system clipboard.

This module centralizes clipboard operations, primarily using the 'pyperclip'
library. The clipboard is read once at startup to pre-fill the URL field and
written when the user copies a freshly created short link.
"""

import logging

import pyperclip

# Set up a logger for this module. The application's entry point should configure the root logger.
logger = logging.getLogger(__name__)

URL_PREFIXES = ("http://", "https://")


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text (str): The string to be copied.

    Returns:
        bool: True if the text was copied successfully, False otherwise.
    """
    try:
        pyperclip.copy(text)
        logger.info(f"Successfully copied to clipboard: '{text}'")
        return True
    except pyperclip.PyperclipException as e:
        # This can happen on systems without a clipboard (e.g., some Linux servers)
        # or if the necessary copy/paste mechanism is not installed (e.g., xclip/xsel).
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip' or 'xsel' is installed."
        )
        return False


def read_clipboard() -> str:
    """Returns the clipboard text, or an empty string if it cannot be read."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.warning(f"Failed to read clipboard: {e}")
        return ""
    return text if isinstance(text, str) else ""


def url_from_clipboard_text(text: str) -> str:
    """Returns `text` if it looks like an http(s) URL, otherwise an empty string."""
    if text and text.startswith(URL_PREFIXES):
        return text
    return ""


def initial_url() -> str:
    """The value the URL field starts with: the clipboard, if it holds a URL."""
    url = url_from_clipboard_text(read_clipboard())
    if url:
        logger.info("Pre-filling URL field from clipboard.")
    return url
