from enum import StrEnum


class ENV(StrEnum):
    """Environment variable names."""

    APP_ENV = 'APP_ENV'
    LOG_LEVEL = 'LOG_LEVEL'
    SLUG_LENGTH = 'SLUG_LENGTH'


# Generated slug length (62^6 ~ 5.68e10 candidates)
DEFAULT_SLUG_LENGTH = 6

# Accepted URL schemes, matched as string prefixes
URL_SCHEMES = ('http://', 'https://')

# Log event codes
LINK_CREATED = 'LINK_CREATED'
LINK_REDIRECTED = 'LINK_REDIRECTED'
LINK_URL_CHANGED = 'LINK_URL_CHANGED'
INVALID_URL = 'INVALID_URL'
SLUG_ALREADY_IN_USE = 'SLUG_ALREADY_IN_USE'
SLUG_NOT_FOUND = 'SLUG_NOT_FOUND'
STORE_INTEGRITY_VIOLATION = 'STORE_INTEGRITY_VIOLATION'
