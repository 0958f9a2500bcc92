"""Slug generation utility

This module provides a helper function for drawing random slugs from the
Base62 alphabet. Characters are drawn without replacement, so a single slug
never repeats a character.

Functions:
    generate_slug(length=6, alphabet=ALPHABET):
        Draw a random slug suitable for use as a short link alias.

Example:
    >>> from linkshortener.utils import generate_slug
    >>> generate_slug()
    'q7ZbA0'
"""

import random
import string

from linkshortener.constants import DEFAULT_SLUG_LENGTH


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits

_rng = random.SystemRandom()


def generate_slug(length: int = DEFAULT_SLUG_LENGTH, alphabet: str = ALPHABET) -> str:
    """Draw a random slug of `length` distinct characters from `alphabet`.

    Uniqueness against existing links is not checked here; see
    UrlShortenerService.generate_unique_slug() for the retry loop.

    Args:
        length (int, optional):
            Number of characters in the slug.
            Defaults to 6.

        alphabet (str, optional):
            Symbols to draw from. Must not contain duplicates.
            Defaults to the Base62 alphabet [a-zA-Z0-9].

    Returns:
        str: A random slug, characters concatenated in draw order.

    Example:
        >>> generate_slug(length=8)
        'Tq2mZx0B'

    NOTE:
        - Uses random.SystemRandom (os.urandom), so slugs are not
          predictable from previously issued ones.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f'Alphabet must not contain duplicate symbols (given value: {alphabet}).')
    if not 1 <= length <= len(alphabet):
        raise ValueError(f'Length must be between 1 and {len(alphabet)} (given value: {length}).')

    return ''.join(_rng.sample(alphabet, length))
