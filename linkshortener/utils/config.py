"""Utility functions for application configuration management.

Configuration is read from environment variables. Every variable has a
default, so the service runs with no environment set at all.

    APP_ENV      - environment name, 'local' by default
    LOG_LEVEL    - root log level, 'INFO' by default (see utils.logging)
    SLUG_LENGTH  - length of generated slugs, 6 by default

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    slug_length() -> int
        Return the configured slug length (`SLUG_LENGTH`), defaulting to 6.

    load_config() -> dict
        Return the whole service configuration as a Python dictionary.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> load_config()
    {'app_env': 'local', 'slug_length': 6}
"""

import os
import logging

from linkshortener.constants import ENV, DEFAULT_SLUG_LENGTH
from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils.slugs import BASE


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.APP_ENV, 'local').lower()


def slug_length() -> int:
    """Return the length of generated slugs by reading 'SLUG_LENGTH'

    Returns:
        int:
            Value of `SLUG_LENGTH` environment variable, 6 by default.

    Raises:
        BadConfigurationError:
            If the value is not an integer between 1 and 62.

    Example:
        >>> os.environ['SLUG_LENGTH'] = '8'
        >>> slug_length()
        8
    """
    raw = os.environ.get(ENV.SLUG_LENGTH)
    if not raw:
        return DEFAULT_SLUG_LENGTH

    try:
        length = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"'{ENV.SLUG_LENGTH}' must be an integer (given value: {raw!r}).") from e

    if not 1 <= length <= BASE:
        raise BadConfigurationError(f"'{ENV.SLUG_LENGTH}' must be between 1 and {BASE} (given value: {length}).")
    return length


def load_config() -> dict:
    """Load the service configuration from the environment

    Returns:
        dict: configuration values keyed by option name.

    Raises:
        BadConfigurationError:
            If any configured value is invalid.

    Example:
        >>> load_config()
        {'app_env': 'local', 'slug_length': 6}
    """
    config = {
        'app_env': app_env(),
        'slug_length': slug_length(),
    }
    logger.debug('Loaded configuration from environment.', extra={'config': config})
    return config
