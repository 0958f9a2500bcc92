"""Data Access Object (DAO) implementation for managing short links in process memory

This module provides an in-memory implementation of LinkBaseDAO. State lives
for as long as the DAO instance does; nothing is shared between processes.

Responsibilities:
    - Insert and retrieve short links;
    - Maintain the per-link redirect counter;
    - Replace the URL of an existing link;
    - Detect and report divergence between links and counters.

Classes:
    LinkMemoryDAO:
        DAO for storing and retrieving ShortLink and Stats in memory.

Example:
    >>> from linkshortener.models import ShortLink, Stats
    >>> from linkshortener.dao.memory import LinkMemoryDAO

    >>> dao = LinkMemoryDAO()
    >>> link = ShortLink(slug='abc123', url='https://example.com/page')
    >>> dao.insert(link, Stats(link=link))
    <LinkMemoryDAO>

    >>> dao.increment_redirects('abc123')
    1
    >>> dao.set_url('abc123', 'https://example.com/other')
    ShortLink(slug='abc123', url='https://example.com/other')
    >>> dao.get_stats('abc123')
    Stats(link=ShortLink(slug='abc123', url='https://example.com/other'), redirects=1)
"""

import dataclasses
from contextlib import AbstractContextManager
from typing import Optional

from beartype import beartype

from linkshortener.models import ShortLink, Stats
from linkshortener.dao.base import LinkBaseDAO
from linkshortener.dao.memory.mixins import LockMixin
from linkshortener.dao.memory.helpers import synchronized
from linkshortener.dao.exceptions import LinkAlreadyExistsError, LinkNotFoundError, StoreIntegrityError


class LinkMemoryDAO(LockMixin, LinkBaseDAO):
    """In-memory Data Access Object (DAO) for managing short links

    The link is stored once per slug; the redirect counter is stored in a
    second mapping under the same slug. Stats are assembled from both on
    read, so a URL change is visible through get_stats() immediately.

    Attributes (see LockMixin):
        lock (threading.RLock):
            Re-entrant lock serializing access to both mappings.

    Methods:
        contains(slug: str) -> bool
        insert(link: ShortLink, stats: Stats) -> LinkMemoryDAO
        get_link(slug: str) -> ShortLink | None
        get_stats(slug: str) -> Stats | None
        increment_redirects(slug: str) -> int
        set_url(slug: str, url: str) -> ShortLink
    """

    def __init__(self, lock: Optional[AbstractContextManager] = None):
        super().__init__(lock=lock)
        self._links: dict[str, ShortLink] = {}
        self._redirects: dict[str, int] = {}

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @synchronized
    def __len__(self) -> int:
        return len(self._links)

    @synchronized
    @beartype
    def contains(self, slug: str) -> bool:
        return slug in self._links

    @synchronized
    @beartype
    def insert(self, link: ShortLink, stats: Stats) -> 'LinkMemoryDAO':
        """Insert a short link and its counter into the store

        Both mappings are written under the DAO lock, so no reader can see
        the link without its counter.

        Args:
            link (ShortLink):
                ShortLink instance to store.
            stats (Stats):
                Initial stats of the link. Only `redirects` is stored; the
                link half of the stats is always derived from `link`.

        Returns:
            LinkMemoryDAO: self (for method chaining)

        Raises:
            LinkAlreadyExistsError:
                If a link with the same slug already exists.
            StoreIntegrityError:
                If `stats.link` is not the link being inserted.
        """
        if stats.link != link:
            raise StoreIntegrityError(f"Stats for slug '{stats.link.slug}' don't describe link with slug '{link.slug}'.")
        if link.slug in self._links or link.slug in self._redirects:
            raise LinkAlreadyExistsError(f"Short link with slug '{link.slug}' already exists.")

        self._links[link.slug] = link
        self._redirects[link.slug] = stats.redirects
        return self

    @synchronized
    @beartype
    def get_link(self, slug: str) -> ShortLink | None:
        return self._links.get(slug)

    @synchronized
    @beartype
    def get_stats(self, slug: str) -> Stats | None:
        """Assemble a Stats snapshot for a slug

        Raises:
            StoreIntegrityError:
                If only one of the link and its counter is stored.
        """
        link = self._links.get(slug)
        redirects = self._redirects.get(slug)

        if link is None and redirects is None:
            return None
        if link is None or redirects is None:
            raise StoreIntegrityError(f"Short link with slug '{slug}' has a broken record (link: {link}, redirects: {redirects}).")

        return Stats(link=link, redirects=redirects)

    @synchronized
    @beartype
    def increment_redirects(self, slug: str) -> int:
        """Increment the redirect counter of a link by one

        Returns:
            int: the counter value after incrementing.

        Raises:
            LinkNotFoundError:
                If no link with the given slug exists.
            StoreIntegrityError:
                If the link exists without a counter.

        Example:
            >>> dao.increment_redirects('abc123')
            1
        """
        if slug not in self._links:
            raise LinkNotFoundError(f"Short link with slug '{slug}' not found.")
        if slug not in self._redirects:
            raise StoreIntegrityError(f"Short link with slug '{slug}' has no redirect counter.")

        self._redirects[slug] += 1
        return self._redirects[slug]

    @synchronized
    @beartype
    def set_url(self, slug: str, url: str) -> ShortLink:
        """Replace the URL of an existing link

        Raises:
            LinkNotFoundError:
                If no link with the given slug exists.
        """
        link = self._links.get(slug)
        if link is None:
            raise LinkNotFoundError(f"Short link with slug '{slug}' not found.")

        updated = dataclasses.replace(link, url=url)
        self._links[slug] = updated
        return updated
