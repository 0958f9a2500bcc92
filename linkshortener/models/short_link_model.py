from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class ShortLink:
    """Represent a slug to URL mapping.

    Attributes:
        slug (str):
            The unique short alias identifying the link. Never changes once
            the link is created.
        url (str):
            The original long URL the slug redirects to. Replaced only by
            an explicit change-URL command.

    Example:
        >>> link = ShortLink(slug='abc123', url='https://example.com/article/123')
        >>> link.slug
        'abc123'
        >>> link.url
        'https://example.com/article/123'
        >>> link.to_dict()
        {'slug': 'abc123', 'url': 'https://example.com/article/123'}
    """
    slug: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
