"""Query side of the shortener service. Queries never mutate the link store."""

from abc import ABC, abstractmethod

from linkshortener.models import Stats


class QueryHandler(ABC):
    """Interface for query handlers."""

    @abstractmethod
    def get_stats(self, slug: str) -> Stats:
        """Return the Stats of a link, such as the number of redirects.

        Raises:
            SlugNotFoundError:
                If `slug` does not map to a link.
        """
        pass
