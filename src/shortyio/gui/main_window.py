# -*- coding: utf-8 -*-
"""
src/shortyio/gui/main_window.py

Defines the MainWindow, the single window of the Shortyio application.

The window collects a URL and the optional link options, hands a
`LinkRequest` to the `RequestBridge` and shows the outcome. The bridge's
worker thread never touches widgets: it only emits `outcome_ready`, which Qt
queues onto the UI thread, where the pending outcome is drained and shown.
"""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QButtonGroup, QCheckBox, QFrame, QGridLayout, QHBoxLayout, QLabel,
    QLineEdit, QProgressBar, QPushButton, QRadioButton, QToolButton,
    QVBoxLayout, QWidget,
)

from ..config import Settings
from ..core.bridge import RequestBridge
from ..core.client import ShortIoClient
from ..core.errors import ValidationError
from ..core.models import DEFAULT_REDIRECT_TYPE, LinkRequest, LinkResult
from ..utils.clipboard_manager import copy_to_clipboard
from .settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Shorty"
WINDOW_SIZE = (500, 520)
WINDOW_MIN_SIZE = (480, 400)

REDIRECT_CHOICES = (
    (301, "301 (Permanent)"),
    (302, "302 (Temporary)"),
    (307, "307 (Temporary)"),
    (308, "308 (Permanent)"),
)


class MainWindow(QWidget):
    """
    The URL shortening form together with its loading, error and result areas.
    """
    # Emitted from the bridge's worker thread once an outcome is waiting.
    outcome_ready = pyqtSignal()

    def __init__(self, settings: Settings, client: ShortIoClient, initial_url: str = "",
                 parent: QWidget = None):
        """
        Args:
            settings (Settings): Settings loaded at startup.
            client (ShortIoClient): Client used for every submission.
            initial_url (str): Pre-filled value of the URL field.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.settings = settings
        self.bridge = RequestBridge(client, notify=self.outcome_ready.emit)
        self.result = None

        self._setup_window_properties()
        self._setup_ui(initial_url)
        self._setup_shortcuts()

        self.outcome_ready.connect(self.on_outcome_ready)
        self._refresh_state()

    def _setup_window_properties(self):
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)
        self.setMinimumSize(*WINDOW_MIN_SIZE)

    def _setup_ui(self, initial_url: str):
        """Creates and arranges the widgets within the window."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 12)

        # Heading
        title = QLabel("Shortyio")
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(22)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        tagline = QLabel("Lightning-fast custom URL shortening")
        tagline.setAlignment(Qt.AlignmentFlag.AlignCenter)
        tagline.setStyleSheet("color: #888888;")
        layout.addWidget(tagline)
        layout.addSpacing(16)

        # Form
        form = QFrame()
        form.setFrameShape(QFrame.Shape.StyledPanel)
        form_layout = QVBoxLayout(form)

        url_header = QHBoxLayout()
        url_header.addWidget(self._bold_label("URL"))
        url_header.addStretch()
        settings_button = QPushButton("⚙")
        settings_button.setToolTip("Settings")
        settings_button.setFixedWidth(32)
        settings_button.clicked.connect(self.open_settings)
        url_header.addWidget(settings_button)
        form_layout.addLayout(url_header)

        self.url_edit = QLineEdit(initial_url)
        self.url_edit.setPlaceholderText("https://example.com/your-long-url")
        self.url_edit.returnPressed.connect(self.create_short_link)
        form_layout.addWidget(self.url_edit)

        form_layout.addWidget(self._bold_label("Custom Path (optional)"))
        self.path_edit = QLineEdit()
        self.path_edit.setPlaceholderText("my-custom-link")
        self.path_edit.returnPressed.connect(self.create_short_link)
        form_layout.addWidget(self.path_edit)

        self.advanced_toggle = QToolButton()
        self.advanced_toggle.setText("Advanced Options")
        self.advanced_toggle.setCheckable(True)
        self.advanced_toggle.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.advanced_toggle.setArrowType(Qt.ArrowType.RightArrow)
        self.advanced_toggle.setStyleSheet("QToolButton { border: none; font-weight: bold; }")
        self.advanced_toggle.toggled.connect(self._toggle_advanced)
        form_layout.addWidget(self.advanced_toggle)

        self.advanced_panel = self._build_advanced_panel()
        self.advanced_panel.setVisible(False)
        form_layout.addWidget(self.advanced_panel)

        self.submit_button = QPushButton("✨ Create Short Link")
        self.submit_button.setMinimumSize(200, 36)
        self.submit_button.clicked.connect(self.create_short_link)
        form_layout.addWidget(self.submit_button, alignment=Qt.AlignmentFlag.AlignCenter)

        layout.addWidget(form)

        # Loading indicator
        self.loading_panel = QWidget()
        loading_layout = QVBoxLayout(self.loading_panel)
        busy = QProgressBar()
        busy.setRange(0, 0)
        busy.setTextVisible(False)
        busy.setMaximumHeight(8)
        loading_layout.addWidget(busy)
        loading_label = QLabel("Creating short link...")
        loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        loading_layout.addWidget(loading_label)
        layout.addWidget(self.loading_panel)

        # Error
        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.error_label.setStyleSheet(
            "color: rgb(220, 60, 60); border: 1px solid #555555; border-radius: 4px; padding: 6px;"
        )
        layout.addWidget(self.error_label)

        # Result
        self.result_panel = self._build_result_panel()
        layout.addWidget(self.result_panel)

        layout.addStretch()
        hint = QLabel("Press ESC to exit")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setStyleSheet("color: #888888; font-size: 10px;")
        layout.addWidget(hint)

    def _build_advanced_panel(self) -> QWidget:
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(12, 0, 0, 0)

        self.cloaking_check = QCheckBox("Enable cloaking")
        self.cloaking_check.setToolTip("Hide the redirect in an iframe")
        layout.addWidget(self.cloaking_check)

        layout.addWidget(QLabel("Password (optional):"))
        self.password_edit = QLineEdit()
        self.password_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.password_edit.setPlaceholderText("Protect link with password")
        layout.addWidget(self.password_edit)

        self.password_contact_check = QCheckBox("Show contact for password")
        self.password_contact_check.setToolTip("Provide email to users to get password")
        layout.addWidget(self.password_contact_check)

        layout.addWidget(QLabel("Clicks Limit (optional):"))
        self.clicks_limit_edit = QLineEdit()
        self.clicks_limit_edit.setPlaceholderText("e.g., 100")
        self.clicks_limit_edit.setToolTip("Disable link after this many clicks")
        self.clicks_limit_edit.setMaximumWidth(100)
        layout.addWidget(self.clicks_limit_edit)

        layout.addWidget(QLabel("Redirect Type:"))
        radios = QGridLayout()
        self.redirect_group = QButtonGroup(panel)
        for index, (code, label) in enumerate(REDIRECT_CHOICES):
            radio = QRadioButton(label)
            radio.setChecked(code == DEFAULT_REDIRECT_TYPE)
            self.redirect_group.addButton(radio, code)
            radios.addWidget(radio, index // 2, index % 2)
        layout.addLayout(radios)

        return panel

    def _build_result_panel(self) -> QWidget:
        panel = QFrame()
        panel.setFrameShape(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(panel)

        success = QLabel("✅ Success!")
        success.setStyleSheet("color: rgb(60, 179, 113); font-weight: bold; font-size: 14px;")
        layout.addWidget(success)

        row = QHBoxLayout()
        row.addWidget(self._bold_label("Short URL:"))
        self.short_url_edit = QLineEdit()
        self.short_url_edit.setReadOnly(True)
        row.addWidget(self.short_url_edit)
        copy_button = QPushButton("📋 Copy")
        copy_button.clicked.connect(self.copy_result)
        row.addWidget(copy_button)
        layout.addLayout(row)

        self.original_url_label = QLabel()
        self.original_url_label.setWordWrap(True)
        self.original_url_label.setStyleSheet("color: #888888; font-size: 11px;")
        layout.addWidget(self.original_url_label)

        return panel

    def _setup_shortcuts(self):
        close_shortcut = QShortcut(QKeySequence(Qt.Key.Key_Escape), self)
        close_shortcut.activated.connect(self.close)

    @staticmethod
    def _bold_label(text: str) -> QLabel:
        label = QLabel(text)
        font = label.font()
        font.setBold(True)
        label.setFont(font)
        return label

    def _toggle_advanced(self, checked: bool):
        self.advanced_toggle.setArrowType(
            Qt.ArrowType.DownArrow if checked else Qt.ArrowType.RightArrow
        )
        self.advanced_panel.setVisible(checked)

    # --- Actions ---

    def build_request(self) -> LinkRequest:
        """Reads the form into a fresh `LinkRequest`."""
        return LinkRequest.from_form(
            original_url=self.url_edit.text(),
            path=self.path_edit.text(),
            cloaking=self.cloaking_check.isChecked(),
            password=self.password_edit.text(),
            password_contact=self.password_contact_check.isChecked(),
            clicks_limit=self.clicks_limit_edit.text(),
            redirect_type=self.redirect_group.checkedId(),
        )

    def create_short_link(self):
        """Submits the form unless a previous submission is still loading."""
        if self.bridge.loading:
            return
        try:
            generation = self.bridge.submit(self.build_request(), self.settings)
        except ValidationError as e:
            logger.info(f"Submission rejected: {e}")
            self.result = None
            self.error_label.setText(f"❌ {e}")
            self._refresh_state()
            return

        if generation is not None:
            self.result = None
            self.error_label.clear()
        self._refresh_state()

    def on_outcome_ready(self):
        """Drains the bridge's pending outcome on the UI thread."""
        outcome = self.bridge.slot.take()
        if outcome is not None:
            if outcome.ok:
                self.show_result(outcome.result)
            else:
                self.result = None
                self.error_label.setText(f"❌ {outcome.error}")
        self._refresh_state()

    def show_result(self, result: LinkResult):
        self.result = result
        self.error_label.clear()
        self.short_url_edit.setText(result.short_url)
        self.original_url_label.setText(f"Original: {result.original_url}")

    def copy_result(self):
        if self.result is not None:
            copy_to_clipboard(self.result.short_url)

    def open_settings(self):
        dialog = SettingsDialog(self.settings, self)
        if dialog.exec():
            self.settings = dialog.settings()
            logger.info("Settings updated.")

    def _refresh_state(self):
        """Syncs widget visibility with the loading flag and the last outcome."""
        loading = self.bridge.loading
        self.submit_button.setEnabled(not loading)
        self.loading_panel.setVisible(loading)
        self.error_label.setVisible(bool(self.error_label.text()))
        self.result_panel.setVisible(self.result is not None)
