from dataclasses import dataclass

from linkshortener.models.short_link_model import ShortLink


@dataclass(frozen=True)
class Stats:
    """Redirect statistics of a ShortLink.

    Attributes:
        link (ShortLink):
            The link these statistics belong to, as currently stored.
        redirects (int):
            Number of successful redirects served for the link.

    Example:
        >>> stats = Stats(link=ShortLink(slug='abc123', url='https://example.com'), redirects=2)
        >>> stats.redirects
        2
        >>> stats.to_dict()
        {'link': {'slug': 'abc123', 'url': 'https://example.com'}, 'redirects': 2}
    """
    link: ShortLink
    redirects: int = 0

    def __post_init__(self):
        if self.redirects < 0:
            raise ValueError(f'Redirects must be a non-negative integer (given value: {self.redirects}).')

    def to_dict(self) -> dict:
        return {'link': self.link.to_dict(), 'redirects': self.redirects}
