from linkshortener.constants import URL_SCHEMES


def validate_url(url: str) -> bool:
    """Check that a URL has an http(s) scheme followed by something

    This is a syntactic sanity check only: no DNS resolution and no
    well-formedness checks beyond the scheme and a non-empty remainder.

    Args:
        url (str): URL to check.

    Returns:
        bool: True if `url` starts with http:// or https:// and has a
              non-empty remainder after '://', False otherwise.

    Example:
        >>> validate_url('https://docs.rs')
        True
        >>> validate_url('http://')
        False
        >>> validate_url('ftp://a.b')
        False
    """
    if not isinstance(url, str) or not url.startswith(URL_SCHEMES):
        return False

    _, _, remainder = url.partition('://')
    return bool(remainder)
