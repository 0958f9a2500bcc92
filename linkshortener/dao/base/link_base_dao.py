"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all link store
implementations. The store is the exclusive owner of slug-keyed state:
every ShortLink and its redirect counter live and change together.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortLink and Stats objects.
    - Maintain the per-slug redirect counter.
    - Expose a transaction context so callers can run check-then-act
      sequences atomically.

Example:
    Typical usage with a concrete implementation:

        >>> from linkshortener.models import ShortLink, Stats
        >>> from linkshortener.dao import LinkMemoryDAO

        >>> dao = LinkMemoryDAO()
        >>> link = ShortLink(slug='a1b2c3', url='https://example.com/blog/article-123')
        >>> with dao.transaction():
        ...     if not dao.contains(link.slug):
        ...         dao.insert(link, Stats(link=link))

        >>> dao.increment_redirects('a1b2c3')
        1
        >>> dao.get_stats('a1b2c3').redirects
        1
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from linkshortener.models import ShortLink, Stats


class LinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        transaction() -> AbstractContextManager:
            Hold exclusive access to the store for the duration of a `with` block.

        contains(slug: str) -> bool:
            Check whether a slug is registered.

        insert(link: ShortLink, stats: Stats) -> LinkBaseDAO:
            Insert a new link together with its stats.
            Raises LinkAlreadyExistsError if the slug already exists.

        get_link(slug: str) -> ShortLink | None:
            Retrieve a link by slug, None if not found.

        get_stats(slug: str) -> Stats | None:
            Retrieve a link's stats by slug, None if not found.

        increment_redirects(slug: str) -> int:
            Add one redirect to a link's counter and return the new value.
            Raises LinkNotFoundError if the slug does not exist.

        set_url(slug: str, url: str) -> ShortLink:
            Replace the URL of an existing link.
            Raises LinkNotFoundError if the slug does not exist.

    NOTE:
        - Links are never deleted. The DAO does not provide an interface
          to remove entries.
        - Every implementation raises StoreIntegrityError when it detects
          a slug with only half of its record.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """Return a context manager holding exclusive access to the store.

        Must be re-entrant: the DAO's own methods may be called inside it.
        """
        pass

    @abstractmethod
    def contains(self, slug: str) -> bool:
        pass

    @abstractmethod
    def insert(self, link: ShortLink, stats: Stats) -> 'LinkBaseDAO':
        """Insert a new ShortLink and its Stats into the data store.

        Args:
            link (ShortLink):
                The link to be inserted.

            stats (Stats):
                Initial statistics of the link. `stats.link` must equal `link`.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            LinkAlreadyExistsError:
                If a link with the same slug already exists.

            StoreIntegrityError:
                If `stats` describes a different link.
        """
        pass

    @abstractmethod
    def get_link(self, slug: str) -> ShortLink | None:
        pass

    @abstractmethod
    def get_stats(self, slug: str) -> Stats | None:
        """Retrieve the Stats of a link by its slug.

        Returns:
            Stats | None: A snapshot of the link's stats, None if not found.

        Raises:
            StoreIntegrityError:
                If the slug has a link but no counter, or a counter but no link.
        """
        pass

    @abstractmethod
    def increment_redirects(self, slug: str) -> int:
        """Increment the redirect counter of a link by exactly one.

        Returns:
            int: The counter value after incrementing.

        Raises:
            LinkNotFoundError:
                If no link with the given slug exists.
        """
        pass

    @abstractmethod
    def set_url(self, slug: str, url: str) -> ShortLink:
        """Replace the URL of an existing link.

        Stats retrieved after this call must reflect the new URL.

        Returns:
            ShortLink: The updated link.

        Raises:
            LinkNotFoundError:
                If no link with the given slug exists.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
