"""Unit tests for validate_url() in validation.py."""

import pytest

from linkshortener.utils import validate_url


@pytest.mark.parametrize(
    'url',
    [
        'http://a.b',
        'https://a.b',
        'http://ya.ru',
        'https://docs.rs/tokio/latest/tokio/',
        'http://localhost:8080/path?q=1',
    ],
)
def test_valid_urls(url):
    assert validate_url(url) is True


@pytest.mark.parametrize(
    'url',
    [
        'ftp://a.b',
        'http://',
        'https://',
        'abc',
        '',
        'HTTP://a.b',
        'http:/a.b',
        ' https://a.b',
        'mailto:someone@example.com',
    ],
)
def test_invalid_urls(url):
    assert validate_url(url) is False


@pytest.mark.parametrize('url', [None, 42, b'https://a.b'])
def test_non_string_urls(url):
    assert validate_url(url) is False
