"""Unit tests for ShortIoClient in core/client.py

The requests.Session is replaced with a MagicMock so no network traffic
happens.

Test coverage includes:

1. Successful creation
   - Ensures one POST with the API key header and JSON payload, and that the
     result mirrors the response fields.

2. Failures
   - Transport errors, non-2xx statuses and undecodable 2xx bodies map to
     TransportError, ApiError and DecodeError.
"""

from unittest.mock import MagicMock

import pytest
import requests

from shortyio.core.client import API_URL, ShortIoClient
from shortyio.core.errors import ApiError, DecodeError, TransportError
from shortyio.core.models import LinkRequest


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return ShortIoClient(session=session)


@pytest.fixture
def link_request():
    return LinkRequest(original_url='https://example.com/long', path='promo')


def make_response(status_code=200, body=None, text=''):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = body
    return response


# -------------------------------
# Tests
# -------------------------------


def test_create_link_posts_once_and_returns_result(client, session, link_request):
    session.post.return_value = make_response(body={
        'shortURL': 'https://sho.rt/promo',
        'originalURL': 'https://example.com/long',
    })

    result = client.create_link(link_request, 'secret-key')

    session.post.assert_called_once_with(
        API_URL,
        json=link_request.to_payload(),
        headers={'authorization': 'secret-key', 'accept': 'application/json'},
    )
    assert result.short_url == 'https://sho.rt/promo'
    assert result.original_url == 'https://example.com/long'


def test_create_link_accepts_any_2xx(client, session, link_request):
    session.post.return_value = make_response(status_code=201, body={
        'shortURL': 'https://sho.rt/promo',
        'originalURL': 'https://example.com/long',
    })

    assert client.create_link(link_request, 'k').short_url == 'https://sho.rt/promo'


@pytest.mark.parametrize('exc', [
    requests.ConnectionError('connection refused'),
    requests.Timeout('read timed out'),
])
def test_create_link_transport_error(client, session, link_request, exc):
    session.post.side_effect = exc

    with pytest.raises(TransportError) as exc_info:
        client.create_link(link_request, 'k')

    assert str(exc) in str(exc_info.value)
    assert str(exc_info.value).startswith('Request failed: ')


@pytest.mark.parametrize('status_code', [400, 401, 409, 500])
def test_create_link_api_error_includes_status_and_body(client, session, link_request, status_code):
    session.post.return_value = make_response(status_code=status_code, text='{"error":"nope"}')

    with pytest.raises(ApiError) as exc_info:
        client.create_link(link_request, 'k')

    assert exc_info.value.status_code == status_code
    assert exc_info.value.body == '{"error":"nope"}'
    assert str(status_code) in str(exc_info.value)
    assert '{"error":"nope"}' in str(exc_info.value)


def test_create_link_non_json_body(client, session, link_request):
    response = make_response(text='<html>')
    response.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
    session.post.return_value = response

    with pytest.raises(DecodeError) as exc_info:
        client.create_link(link_request, 'k')

    assert 'Expecting value' in str(exc_info.value)


def test_create_link_body_missing_fields(client, session, link_request):
    session.post.return_value = make_response(body={'id': 1})

    with pytest.raises(DecodeError):
        client.create_link(link_request, 'k')
