# -*- coding: utf-8 -*-
"""
src/shortyio/core/models.py

Data records exchanged with the short.io links endpoint.

`LinkRequest` is built fresh from the form on every submission and is frozen,
so the background worker can never observe a half-edited request.
`LinkResult` is the part of a successful response the application uses.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from .errors import DecodeError, ValidationError

logger = logging.getLogger(__name__)

REDIRECT_TYPES = (301, 302, 307, 308)
DEFAULT_REDIRECT_TYPE = 301
DEFAULT_TAGS = ("shortyio",)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value if value.strip() else None


def _parse_clicks_limit(text: str) -> Optional[int]:
    """Parses the clicks-limit field. Unparseable input is dropped, not rejected."""
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        logger.warning(f"Ignoring clicks limit that is not an integer: '{text}'")
        return None


@dataclass(frozen=True)
class LinkRequest:
    """A single 'create link' request, as sent to short.io."""

    original_url: str
    path: Optional[str] = None
    domain: Optional[str] = None
    cloaking: Optional[bool] = None
    password: Optional[str] = None
    password_contact: Optional[bool] = None
    clicks_limit: Optional[int] = None
    redirect_type: int = DEFAULT_REDIRECT_TYPE
    tags: Tuple[str, ...] = DEFAULT_TAGS
    allow_duplicates: bool = False

    @classmethod
    def from_form(
        cls,
        original_url: str,
        path: str = "",
        cloaking: bool = False,
        password: str = "",
        password_contact: bool = False,
        clicks_limit: str = "",
        redirect_type: int = DEFAULT_REDIRECT_TYPE,
    ) -> "LinkRequest":
        """
        Builds a request from raw form values.

        Empty text fields and unchecked boxes are left out of the request
        entirely rather than sent as empty values.

        Raises:
            ValidationError: If `redirect_type` is not a supported status code.
        """
        if redirect_type not in REDIRECT_TYPES:
            raise ValidationError(
                f"Redirect type must be one of {', '.join(str(code) for code in REDIRECT_TYPES)}"
            )
        return cls(
            original_url=original_url.strip(),
            path=_blank_to_none(path),
            cloaking=True if cloaking else None,
            password=password if password else None,
            password_contact=True if password_contact else None,
            clicks_limit=_parse_clicks_limit(clicks_limit),
            redirect_type=redirect_type,
        )

    def with_domain(self, domain: str) -> "LinkRequest":
        """Fills in the default domain unless this request already overrides it."""
        if self.domain or not domain:
            return self
        return replace(self, domain=domain)

    def to_payload(self) -> Dict[str, Any]:
        """Serializes the request into the JSON body expected by short.io."""
        payload: Dict[str, Any] = {"originalURL": self.original_url}
        optional = (
            ("path", self.path),
            ("domain", self.domain),
            ("cloaking", self.cloaking),
            ("password", self.password),
            ("passwordContact", self.password_contact),
        )
        for key, value in optional:
            if value is not None:
                payload[key] = value
        payload["allowDuplicates"] = self.allow_duplicates
        if self.clicks_limit is not None:
            payload["clicksLimit"] = self.clicks_limit
        payload["redirectType"] = self.redirect_type
        payload["tags"] = list(self.tags)
        return payload


@dataclass(frozen=True)
class LinkResult:
    """The shortened link returned by short.io."""

    short_url: str
    original_url: str

    @classmethod
    def from_response(cls, data: Any) -> "LinkResult":
        """
        Extracts the two fields the application needs from a response body.

        Args:
            data: The decoded JSON body.

        Returns:
            LinkResult: The parsed result.

        Raises:
            DecodeError: If the body is not an object or lacks either field.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
        fields = {}
        for key in ("shortURL", "originalURL"):
            if key not in data:
                raise DecodeError(f"missing field `{key}`")
            value = data[key]
            if not isinstance(value, str):
                raise DecodeError(f"field `{key}` is {type(value).__name__}, expected a string")
            fields[key] = value
        return cls(short_url=fields["shortURL"], original_url=fields["originalURL"])
