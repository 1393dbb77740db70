# -*- coding: utf-8 -*-
"""
src/shortyio/app.py

Application controller for Shortyio.

`ShortyApp` loads the persisted settings, reads the clipboard for a URL to
pre-fill, builds the short.io client and opens the main window. `main()` is
the entry point used by both `main.py` and the `shortyio` console script.
"""

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from .config import load_settings
from .core.client import ShortIoClient
from .gui.main_window import MainWindow
from .utils.clipboard_manager import initial_url

APP_ID = "systems.weedmark.shortyio"

logger = logging.getLogger(__name__)


class ShortyApp:
    """
    Wires the settings, the HTTP client and the main window together.
    """

    def __init__(self):
        self.settings = load_settings()
        self.client = ShortIoClient()
        self.window = MainWindow(self.settings, self.client, initial_url=initial_url())

    def show(self):
        self.window.show()
        self.window.raise_()
        self.window.activateWindow()


def configure_logging(level: int = logging.INFO):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Starts the Qt event loop with the Shortyio window.

    Returns:
        int: The Qt exit code (0 when the window is closed normally).
    """
    configure_logging()
    app = QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName("Shorty")
    app.setDesktopFileName(APP_ID)

    shorty = ShortyApp()
    shorty.show()
    logger.info("Shortyio started.")

    exit_code = app.exec()
    logger.info("Shortyio closed.")
    return exit_code
