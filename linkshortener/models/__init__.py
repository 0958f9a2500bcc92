from linkshortener.models.short_link_model import ShortLink
from linkshortener.models.stats_model import Stats


__all__ = [
    'ShortLink',
    'Stats',
]
