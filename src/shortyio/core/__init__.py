# -*- coding: utf-8 -*-
"""
The Core Package for Shortyio.

Everything needed to create a short link without any GUI:

- `models`: `LinkRequest` and `LinkResult`.
- `errors`: the error taxonomy surfaced to the user.
- `client`: the blocking short.io HTTP client.
- `bridge`: runs the client off the UI thread and reports back.
"""

from .bridge import OutcomeSlot, Outcome, RequestBridge
from .client import ShortIoClient
from .errors import ApiError, DecodeError, ShortyError, TransportError, ValidationError
from .models import LinkRequest, LinkResult

__all__ = [
    "ApiError",
    "DecodeError",
    "LinkRequest",
    "LinkResult",
    "Outcome",
    "OutcomeSlot",
    "RequestBridge",
    "ShortIoClient",
    "ShortyError",
    "TransportError",
    "ValidationError",
]
