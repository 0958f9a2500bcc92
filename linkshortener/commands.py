"""Command side of the shortener service.

Commands are the operations that may mutate the link store: creating a
link, serving a redirect (which advances the link's counter) and changing
a link's URL.
"""

from abc import ABC, abstractmethod

from linkshortener.models import ShortLink


class CommandHandler(ABC):
    """Interface for command handlers."""

    @abstractmethod
    def create_short_link(self, url: str, slug: str | None = None) -> ShortLink:
        """Create a new short link.

        If `slug` is not provided, the handler generates one.

        Args:
            url (str):
                The original URL to shorten.
            slug (str | None):
                Optional predefined slug.

        Returns:
            ShortLink: the newly created link.

        Raises:
            InvalidUrlError:
                If `url` is not a valid http(s) URL.
            SlugAlreadyInUseError:
                If `slug` already maps to a link.
        """
        pass

    @abstractmethod
    def redirect(self, slug: str) -> ShortLink:
        """Resolve a slug for redirection, counting the redirect.

        Raises:
            SlugNotFoundError:
                If `slug` does not map to a link.
        """
        pass

    @abstractmethod
    def change_short_link(self, slug: str, new_url: str) -> ShortLink:
        """Point an existing slug at a new URL.

        Raises:
            InvalidUrlError:
                If `new_url` is not a valid http(s) URL. Checked first.
            SlugNotFoundError:
                If `slug` does not map to a link.
        """
        pass
