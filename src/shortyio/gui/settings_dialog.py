# -*- coding: utf-8 -*-
"""
src/shortyio/gui/settings_dialog.py

Defines the SettingsDialog for editing the short.io API key and domain.

The dialog edits a copy of the current settings. "Save" writes them to the
settings file and accepts the dialog; "Cancel" discards the edits.
"""

import logging

from PyQt6.QtWidgets import (
    QDialog, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget,
)

from ..config import Settings, save_settings

logger = logging.getLogger(__name__)


class SettingsDialog(QDialog):
    """A small modal dialog holding the API key and default domain fields."""

    def __init__(self, settings: Settings, parent: QWidget = None):
        super().__init__(parent)
        self.setWindowTitle("⚙ Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        layout.addWidget(QLabel("API Key:"))
        self.api_key_edit = QLineEdit(self._settings.api_key)
        self.api_key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_edit.setPlaceholderText("Enter your short.io API key")
        layout.addWidget(self.api_key_edit)
        layout.addSpacing(8)

        layout.addWidget(QLabel("Domain (optional):"))
        self.domain_edit = QLineEdit(self._settings.domain)
        self.domain_edit.setPlaceholderText("e.g., yourdomain.com")
        layout.addWidget(self.domain_edit)
        layout.addSpacing(12)

        buttons = QHBoxLayout()
        save_button = QPushButton("Save")
        save_button.setDefault(True)
        save_button.clicked.connect(self.save)
        cancel_button = QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)
        buttons.addWidget(save_button)
        buttons.addWidget(cancel_button)
        buttons.addStretch()
        layout.addLayout(buttons)

    def settings(self) -> Settings:
        """The settings as currently entered in the dialog."""
        return Settings(
            api_key=self.api_key_edit.text().strip(),
            domain=self.domain_edit.text().strip(),
        )

    def save(self):
        """Persists the entered settings and closes the dialog."""
        try:
            save_settings(self.settings())
        except OSError as e:
            # The new values still apply to this session.
            logger.error(f"Failed to save config: {e}")
        self.accept()
