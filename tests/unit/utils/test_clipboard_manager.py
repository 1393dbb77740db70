"""Unit tests for utils/clipboard_manager.py

pyperclip is monkeypatched so the tests never touch the real clipboard.

Test coverage includes:

1. URL pre-fill
   - Clipboard text starting with http:// or https:// pre-fills the URL field;
     anything else, or an unreadable clipboard, yields an empty field.

2. Copying
   - copy_to_clipboard reports success and failure without raising.
"""

from unittest.mock import MagicMock

import pytest
import pyperclip

from shortyio.utils import clipboard_manager
from shortyio.utils.clipboard_manager import copy_to_clipboard, initial_url, url_from_clipboard_text


def _raise_clipboard_error(*args):
    raise pyperclip.PyperclipException('no clipboard mechanism')


@pytest.mark.parametrize('text, expected', [
    ('https://example.com/x', 'https://example.com/x'),
    ('http://example.com', 'http://example.com'),
    ('not a url', ''),
    ('ftp://example.com', ''),
    ('', ''),
])
def test_url_from_clipboard_text(text, expected):
    assert url_from_clipboard_text(text) == expected


def test_initial_url_uses_clipboard_url(monkeypatch):
    monkeypatch.setattr(clipboard_manager.pyperclip, 'paste', lambda: 'https://example.com/x')

    assert initial_url() == 'https://example.com/x'


def test_initial_url_ignores_non_url(monkeypatch):
    monkeypatch.setattr(clipboard_manager.pyperclip, 'paste', lambda: 'not a url')

    assert initial_url() == ''


def test_initial_url_when_clipboard_unavailable(monkeypatch):
    monkeypatch.setattr(clipboard_manager.pyperclip, 'paste', _raise_clipboard_error)

    assert initial_url() == ''


def test_copy_to_clipboard_success(monkeypatch):
    copy = MagicMock()
    monkeypatch.setattr(clipboard_manager.pyperclip, 'copy', copy)

    assert copy_to_clipboard('https://sho.rt/abc') is True
    copy.assert_called_once_with('https://sho.rt/abc')


def test_copy_to_clipboard_failure(monkeypatch):
    monkeypatch.setattr(clipboard_manager.pyperclip, 'copy', _raise_clipboard_error)

    assert copy_to_clipboard('https://sho.rt/abc') is False
