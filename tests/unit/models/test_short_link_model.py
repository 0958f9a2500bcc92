"""Unit tests for the ShortLink and Stats dataclasses.

Test coverage includes:

1. Model creation
   - Ensures instances can be created with valid field values.
   - Verifies Stats.redirects defaults to 0 and rejects negative counts.

2. Equality semantics
   - Confirms that models with identical data compare equal.
   - Ensures differing slugs, URLs or counts produce non-equal instances.

3. Immutability
   - Verifies that all fields are frozen after object creation.

4. Serialization
   - Ensures to_dict() returns plain dictionaries for adapters.
"""

from dataclasses import FrozenInstanceError

import pytest

from linkshortener.models import ShortLink, Stats


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------


def test_valid_short_link_creation():
    """Ensure ShortLink can be created with a slug and URL."""
    link = ShortLink(slug='abc123', url='https://example.com/article/123')

    assert link.slug == 'abc123'
    assert link.url == 'https://example.com/article/123'


def test_stats_redirects_default_to_zero():
    """Ensure Stats starts at zero redirects when no count is given."""
    stats = Stats(link=ShortLink(slug='abc123', url='https://example.com'))
    assert stats.redirects == 0


def test_stats_rejects_negative_redirects():
    """Ensure a negative redirect count is refused."""
    with pytest.raises(ValueError, match='non-negative'):
        Stats(link=ShortLink(slug='abc123', url='https://example.com'), redirects=-1)


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------


def test_equal_models():
    assert ShortLink('abc123', 'https://example.com') == ShortLink('abc123', 'https://example.com')
    assert Stats(ShortLink('abc123', 'https://example.com'), 3) == Stats(ShortLink('abc123', 'https://example.com'), 3)


@pytest.mark.parametrize(
    'other',
    [
        ShortLink('abc124', 'https://example.com'),
        ShortLink('abc123', 'https://example.org'),
    ],
)
def test_unequal_links(other):
    assert ShortLink('abc123', 'https://example.com') != other


def test_unequal_stats():
    link = ShortLink('abc123', 'https://example.com')
    assert Stats(link, 1) != Stats(link, 2)


def test_short_link_is_hashable():
    """Ensure equal links hash equally so they can key dictionaries and sets."""
    assert len({ShortLink('abc123', 'https://example.com'), ShortLink('abc123', 'https://example.com')}) == 1


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


def test_short_link_is_frozen():
    link = ShortLink(slug='abc123', url='https://example.com')
    with pytest.raises(FrozenInstanceError):
        link.url = 'https://example.org'
    with pytest.raises(FrozenInstanceError):
        link.slug = 'xyz789'


def test_stats_is_frozen():
    stats = Stats(link=ShortLink(slug='abc123', url='https://example.com'))
    with pytest.raises(FrozenInstanceError):
        stats.redirects = 10


# -------------------------------------------------
# 4. Serialization
# -------------------------------------------------


def test_to_dict():
    link = ShortLink(slug='abc123', url='https://example.com')
    assert link.to_dict() == {'slug': 'abc123', 'url': 'https://example.com'}
    assert Stats(link, 5).to_dict() == {'link': {'slug': 'abc123', 'url': 'https://example.com'}, 'redirects': 5}
