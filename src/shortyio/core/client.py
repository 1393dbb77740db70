# -*- coding: utf-8 -*-
"""
src/shortyio/core/client.py

HTTP client for the short.io "create link" endpoint.

This is the only module that talks to the network. It performs exactly one
POST per call and translates every possible outcome into either a
`LinkResult` or one of the errors from `core.errors`. It is blocking by
design of `requests`; callers that must stay responsive run it off the UI
thread (see `core.bridge`).
"""

import logging
from typing import Optional

import requests

from .errors import ApiError, DecodeError, TransportError
from .models import LinkRequest, LinkResult

logger = logging.getLogger(__name__)

API_URL = "https://api.short.io/links"


class ShortIoClient:
    """
    Thin wrapper around a `requests.Session` bound to the short.io API.
    """

    def __init__(self, session: Optional[requests.Session] = None, api_url: str = API_URL):
        """
        Args:
            session (requests.Session, optional): Session to send requests with.
                A new one is created if omitted.
            api_url (str): Endpoint for link creation.
        """
        self.session = session if session is not None else requests.Session()
        self.api_url = api_url

    def create_link(self, request: LinkRequest, api_key: str) -> LinkResult:
        """
        Creates a short link.

        Args:
            request (LinkRequest): The link to create.
            api_key (str): The short.io secret API key.

        Returns:
            LinkResult: The shortened and original URL echoed by the API.

        Raises:
            TransportError: On connection failures and timeouts.
            ApiError: If the API answers with a non-2xx status.
            DecodeError: If a 2xx body cannot be parsed into a `LinkResult`.
        """
        logger.info(f"Creating short link for '{request.original_url}'")
        try:
            response = self.session.post(
                self.api_url,
                json=request.to_payload(),
                headers={
                    "authorization": api_key,
                    "accept": "application/json",
                },
            )
        except requests.RequestException as e:
            logger.error(f"Request to {self.api_url} failed: {e}")
            raise TransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"short.io rejected the request with status {response.status_code}")
            raise ApiError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"short.io returned a body that is not JSON: {e}")
            raise DecodeError(str(e)) from e

        result = LinkResult.from_response(data)
        logger.info(f"Short link created: {result.short_url}")
        return result
