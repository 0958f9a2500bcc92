"""Unit tests for the demo entry point in __main__.py

Test coverage includes:
    1. Successful run
       - The demo walks through every step and exits with 0.
    2. Failing runs
       - Invalid URLs or a no-op URL change exit with 1.
"""

from unittest.mock import patch

import pytest

from linkshortener.__main__ import main, run_demo
from linkshortener.service import UrlShortenerService


@pytest.fixture(autouse=True)
def _no_logging_setup():
    """Keep the demo from reconfiguring the root logger during tests."""
    with patch('linkshortener.__main__.initialize_logging') as mock:
        yield mock


# -------------------------------
# 1. Successful run
# -------------------------------


def test_main_succeeds(capsys, _no_logging_setup):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert 'Created short link. Slug: ' in out
    assert 'Slug redirects to link: https://docs.rs\n' in out
    assert 'SlugAlreadyInUse' in out
    assert 'https://docs.rs/tokio/latest/tokio/ after change URL' in out
    assert 'is: 2' in out
    assert 'SlugNotFound' in out
    _no_logging_setup.assert_called_once_with(None)


def test_main_passes_log_level(_no_logging_setup):
    main(['--log-level', 'DEBUG'])
    _no_logging_setup.assert_called_once_with('DEBUG')


def test_run_demo_leaves_one_link():
    service = UrlShortenerService()
    assert run_demo(service, 'https://example.com', 'https://example.org')
    assert len(service.dao) == 1


# -------------------------------
# 2. Failing runs
# -------------------------------


def test_main_with_invalid_url(capsys):
    assert main(['--url', 'ftp://example.com']) == 1
    assert 'InvalidUrl' in capsys.readouterr().out


def test_main_with_invalid_new_url(capsys):
    assert main(['--new-url', 'abc']) == 1
    assert 'Can not change url of link. InvalidUrl' in capsys.readouterr().out


def test_main_with_unchanged_url(capsys):
    assert main(['--url', 'https://example.com', '--new-url', 'https://example.com']) == 1
    assert 'still redirects' in capsys.readouterr().out
