from linkshortener.models import ShortLink, Stats
from linkshortener.service import UrlShortenerService
from linkshortener.exceptions import ShortenerError, InvalidUrlError, SlugAlreadyInUseError, SlugNotFoundError


__all__ = [
    'ShortLink',
    'Stats',
    'UrlShortenerService',
    'ShortenerError',
    'InvalidUrlError',
    'SlugAlreadyInUseError',
    'SlugNotFoundError',
]
