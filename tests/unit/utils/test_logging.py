"""Unit tests for JSON logging in logging.py

Test coverage includes:
    1. JsonFormatter
       - Emits timestamp, level, logger and message.
       - Attaches `extra` fields.
       - Includes formatted exceptions.
    2. initialize_logging()
       - Reads the root level from LOG_LEVEL, or from an explicit argument.
"""

import sys
import json
import logging

import pytest

from linkshortener.utils.logging import JsonFormatter, initialize_logging


@pytest.fixture
def record():
    _record = logging.LogRecord(
        name='linkshortener.service',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='Created short link %s.',
        args=('abc123',),
        exc_info=None,
    )
    _record.created = 0
    return _record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def test_format_standard_fields(record):
    log = json.loads(JsonFormatter().format(record))

    assert log['timestamp'] == '1970-01-01T00:00:00.000Z'
    assert log['level'] == 'INFO'
    assert log['logger'] == 'linkshortener.service'
    assert log['message'] == 'Created short link abc123.'


def test_format_attaches_extras(record):
    record.slug = 'abc123'
    record.event = 'LINK_CREATED'

    log = json.loads(JsonFormatter().format(record))

    assert log['slug'] == 'abc123'
    assert log['event'] == 'LINK_CREATED'
    assert 'msg' not in log
    assert 'args' not in log


def test_format_includes_exception(record):
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record.exc_info = sys.exc_info()

    log = json.loads(JsonFormatter().format(record))
    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


def test_initialize_logging_from_environment(monkeypatch, restore_root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    initialize_logging()

    assert restore_root_logger.level == logging.DEBUG
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_initialize_logging_with_explicit_level(monkeypatch, restore_root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    initialize_logging('warning')

    assert restore_root_logger.level == logging.WARNING
