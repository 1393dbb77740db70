# -*- coding: utf-8 -*-
"""
src/shortyio/core/errors.py

Exceptions raised while creating a short link.

Every error carries a human-readable message (``str(error)``) that the main
window shows as-is. None of them are fatal: the window stays usable and the
user can submit again.
"""


class ShortyError(Exception):
    """Base class for all link-creation failures."""


class ValidationError(ShortyError):
    """A required local field is missing. Raised before any network work."""


class TransportError(ShortyError):
    """The request never got an HTTP response (connection error, timeout)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Request failed: {reason}")


class ApiError(ShortyError):
    """short.io answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error {status_code}: {body}")


class DecodeError(ShortyError):
    """A 2xx response whose body is not a valid link object."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to parse response: {reason}")
