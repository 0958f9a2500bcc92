"""Shortener service implementing both the command and the query side

The service owns a link store (any LinkBaseDAO) for its whole lifetime.
Every check-then-act sequence runs inside one store transaction, so the
service is safe to share between threads.

Classes:
    UrlShortenerService:
        CommandHandler and QueryHandler over a LinkBaseDAO.

Example:
    >>> from linkshortener.service import UrlShortenerService
    >>> service = UrlShortenerService()
    >>> link = service.create_short_link('https://docs.rs')
    >>> len(link.slug)
    6
    >>> service.redirect(link.slug) == link
    True
    >>> service.get_stats(link.slug).redirects
    1
"""

import logging

from beartype import beartype

from linkshortener.commands import CommandHandler
from linkshortener.queries import QueryHandler
from linkshortener.models import ShortLink, Stats
from linkshortener.dao import LinkBaseDAO, LinkMemoryDAO
from linkshortener.dao.exceptions import LinkAlreadyExistsError, LinkNotFoundError, StoreIntegrityError
from linkshortener.exceptions import InvalidUrlError, SlugAlreadyInUseError, SlugNotFoundError
from linkshortener.utils import generate_slug, validate_url, load_config
from linkshortener.constants import (
    DEFAULT_SLUG_LENGTH,
    LINK_CREATED,
    LINK_REDIRECTED,
    LINK_URL_CHANGED,
    INVALID_URL,
    SLUG_ALREADY_IN_USE,
    SLUG_NOT_FOUND,
    STORE_INTEGRITY_VIOLATION,
)


logger = logging.getLogger(__name__)


class UrlShortenerService(CommandHandler, QueryHandler):
    """URL shortener over an owned link store

    Attributes:
        dao (LinkBaseDAO):
            Link store holding every ShortLink and its redirect counter.
        slug_length (int):
            Length of generated slugs.

    Methods:
        create_short_link(url: str, slug: str | None = None) -> ShortLink
        redirect(slug: str) -> ShortLink
        change_short_link(slug: str, new_url: str) -> ShortLink
        get_stats(slug: str) -> Stats
        generate_unique_slug() -> str
    """

    def __init__(self, dao: LinkBaseDAO | None = None, slug_length: int = DEFAULT_SLUG_LENGTH):
        self.dao = dao if dao is not None else LinkMemoryDAO()
        self.slug_length = slug_length

    @classmethod
    def from_config(cls, dao: LinkBaseDAO | None = None) -> 'UrlShortenerService':
        """Build a service configured from the environment (see utils.config)"""
        config = load_config()
        return cls(dao=dao, slug_length=config['slug_length'])

    def generate_unique_slug(self) -> str:
        """Draw random slugs until one is not registered in the store

        There is no retry cap. The absence check and the caller's insert
        must share one transaction for the result to stay unique.

        Returns:
            str: a slug absent from the store at the time of the call.
        """
        with self.dao.transaction():
            while True:
                slug = generate_slug(length=self.slug_length)
                if not self.dao.contains(slug):
                    return slug
                logger.debug('Generated slug %s is taken, drawing again.', slug)

    @beartype
    def create_short_link(self, url: str, slug: str | None = None) -> ShortLink:
        """Create a new short link

        Procedure:
        - Step 1: Validate the URL
        - Step 2: Generate a slug if none was given
        - Step 3: Check the slug is not in use
        - Step 4: Insert the link with a zero redirect counter

        Steps 2-4 run in a single store transaction.

        Example:
            >>> service.create_short_link('https://docs.rs', slug='docs')
            ShortLink(slug='docs', url='https://docs.rs')
        """
        # 1- Validate URL
        if not validate_url(url):
            logger.info('Rejected invalid URL.', extra={'url': url, 'event': INVALID_URL})
            raise InvalidUrlError(f"Invalid URL '{url}': expected http:// or https:// followed by a host.")

        with self.dao.transaction():
            # 2- Generate slug if not provided
            if slug is None:
                slug = self.generate_unique_slug()

            # 3- Slug must be unique
            if self.dao.contains(slug):
                logger.info('Slug already in use.', extra={'slug': slug, 'event': SLUG_ALREADY_IN_USE})
                raise SlugAlreadyInUseError(f"Slug '{slug}' is already in use.")

            # 4- Store link together with its stats
            link = ShortLink(slug=slug, url=url)
            try:
                self.dao.insert(link, Stats(link=link, redirects=0))
            except LinkAlreadyExistsError as e:  # pragma: no cover
                raise SlugAlreadyInUseError(f"Slug '{slug}' is already in use.") from e

        logger.info('Created short link.', extra={'slug': slug, 'url': url, 'event': LINK_CREATED})
        return link

    @beartype
    def redirect(self, slug: str) -> ShortLink:
        """Resolve a slug to its link and count the redirect

        This is not a pure read: on success the link's counter advances by one.

        Example:
            >>> service.redirect('docs')
            ShortLink(slug='docs', url='https://docs.rs')
        """
        with self.dao.transaction():
            link = self.dao.get_link(slug)
            if link is None:
                logger.info('Short link not found.', extra={'slug': slug, 'event': SLUG_NOT_FOUND})
                raise SlugNotFoundError(f"Slug '{slug}' not found.")

            try:
                redirects = self.dao.increment_redirects(slug)
            except StoreIntegrityError:
                logger.critical('Link store record is broken.', extra={'slug': slug, 'event': STORE_INTEGRITY_VIOLATION})
                raise

        logger.info('Redirecting to target URL.', extra={'slug': slug, 'redirects': redirects, 'event': LINK_REDIRECTED})
        return link

    @beartype
    def change_short_link(self, slug: str, new_url: str) -> ShortLink:
        """Replace the URL an existing slug points to

        The URL is validated before the slug is looked up, so an invalid URL
        for an unknown slug reports InvalidUrlError.

        Example:
            >>> service.change_short_link('docs', 'https://docs.rs/tokio/latest/tokio/')
            ShortLink(slug='docs', url='https://docs.rs/tokio/latest/tokio/')
        """
        if not validate_url(new_url):
            logger.info('Rejected invalid URL.', extra={'slug': slug, 'url': new_url, 'event': INVALID_URL})
            raise InvalidUrlError(f"Invalid URL '{new_url}': expected http:// or https:// followed by a host.")

        with self.dao.transaction():
            try:
                link = self.dao.set_url(slug, new_url)
            except LinkNotFoundError as e:
                logger.info('Short link not found.', extra={'slug': slug, 'event': SLUG_NOT_FOUND})
                raise SlugNotFoundError(f"Slug '{slug}' not found.") from e

        logger.info('Changed short link URL.', extra={'slug': slug, 'url': new_url, 'event': LINK_URL_CHANGED})
        return link

    @beartype
    def get_stats(self, slug: str) -> Stats:
        """Return a snapshot of a link's redirect statistics

        Raises:
            SlugNotFoundError:
                If `slug` does not map to a link.
            StoreIntegrityError:
                If the store holds only half of the slug's record.

        Example:
            >>> service.get_stats('docs')
            Stats(link=ShortLink(slug='docs', url='https://docs.rs/tokio/latest/tokio/'), redirects=2)
        """
        try:
            stats = self.dao.get_stats(slug)
        except StoreIntegrityError:
            logger.critical('Link store record is broken.', extra={'slug': slug, 'event': STORE_INTEGRITY_VIOLATION})
            raise

        if stats is None:
            logger.info('Short link not found.', extra={'slug': slug, 'event': SLUG_NOT_FOUND})
            raise SlugNotFoundError(f"Slug '{slug}' not found.")
        return stats
