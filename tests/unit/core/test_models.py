"""Unit tests for LinkRequest and LinkResult in core/models.py

Test coverage includes:

1. Building requests from form values
   - Empty fields and unchecked boxes are omitted, clicks limit parsing,
     redirect type validation.

2. Request payload
   - Field names, always-present fields and the fixed tag list.

3. Default domain
   - Settings domain applies only when the request has no override.

4. Response parsing
   - Valid bodies, missing fields, wrong types.
"""

import pytest

from shortyio.core.errors import DecodeError, ValidationError
from shortyio.core.models import LinkRequest, LinkResult


# -------------------------------
# LinkRequest.from_form
# -------------------------------


def test_from_form_minimal_payload():
    request = LinkRequest.from_form(original_url='https://example.com/long')

    assert request.to_payload() == {
        'originalURL': 'https://example.com/long',
        'allowDuplicates': False,
        'redirectType': 301,
        'tags': ['shortyio'],
    }


def test_from_form_full_payload():
    request = LinkRequest.from_form(
        original_url='https://example.com/long',
        path='my-link',
        cloaking=True,
        password='hunter2',
        password_contact=True,
        clicks_limit='100',
        redirect_type=307,
    )

    assert request.to_payload() == {
        'originalURL': 'https://example.com/long',
        'path': 'my-link',
        'cloaking': True,
        'password': 'hunter2',
        'passwordContact': True,
        'allowDuplicates': False,
        'clicksLimit': 100,
        'redirectType': 307,
        'tags': ['shortyio'],
    }


def test_from_form_drops_blank_path_and_unchecked_flags():
    request = LinkRequest.from_form(original_url='https://example.com', path='   ')

    assert request.path is None
    assert request.cloaking is None
    assert request.password_contact is None


@pytest.mark.parametrize('text', ['abc', '1.5', ''])
def test_from_form_ignores_unparseable_clicks_limit(text):
    request = LinkRequest.from_form(original_url='https://example.com', clicks_limit=text)

    assert request.clicks_limit is None
    assert 'clicksLimit' not in request.to_payload()


def test_from_form_rejects_unsupported_redirect_type():
    with pytest.raises(ValidationError):
        LinkRequest.from_form(original_url='https://example.com', redirect_type=303)


def test_request_is_immutable():
    request = LinkRequest.from_form(original_url='https://example.com')

    with pytest.raises(AttributeError):
        request.original_url = 'https://other.example.com'


# -------------------------------
# Default domain
# -------------------------------


def test_with_domain_fills_missing_domain():
    request = LinkRequest(original_url='https://example.com').with_domain('sho.rt')

    assert request.to_payload()['domain'] == 'sho.rt'


def test_with_domain_keeps_override():
    request = LinkRequest(original_url='https://example.com', domain='mine.io')

    assert request.with_domain('sho.rt').domain == 'mine.io'


def test_with_empty_domain_leaves_request_untouched():
    request = LinkRequest(original_url='https://example.com')

    assert request.with_domain('') is request
    assert 'domain' not in request.to_payload()


# -------------------------------
# LinkResult.from_response
# -------------------------------


def test_from_response_reads_urls():
    result = LinkResult.from_response({
        'shortURL': 'https://sho.rt/abc',
        'originalURL': 'https://example.com/long',
        'idString': 'lnk_123',
    })

    assert result.short_url == 'https://sho.rt/abc'
    assert result.original_url == 'https://example.com/long'


@pytest.mark.parametrize('data', [
    {'originalURL': 'https://example.com'},
    {'shortURL': 'https://sho.rt/abc'},
    {'shortURL': 42, 'originalURL': 'https://example.com'},
    ['https://sho.rt/abc'],
    None,
])
def test_from_response_rejects_malformed_bodies(data):
    with pytest.raises(DecodeError) as exc_info:
        LinkResult.from_response(data)

    assert str(exc_info.value).startswith('Failed to parse response: ')
