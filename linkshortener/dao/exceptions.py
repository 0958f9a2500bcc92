"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    LinkNotFoundError:
        Raised when a ShortLink is not found in the data store.

    LinkAlreadyExistsError:
        Raised when attempting to insert a ShortLink whose slug already exists.

    StoreIntegrityError:
        Raised when the data store detects a broken internal invariant
        (e.g. a link without its redirect counter). This is a programming
        error, never an expected outcome of a caller's request.

Example:
    >>> from linkshortener.dao.exceptions import LinkNotFoundError
    >>> raise LinkNotFoundError("Short link with slug 'abc123' not found.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.LinkNotFoundError: Short link with slug 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class LinkNotFoundError(DAOError):
    """Exception raised when a ShortLink is not found in the data store."""

    pass


class LinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortLink that already exists in the data store."""

    pass


class StoreIntegrityError(DAOError):
    """Exception raised when the link and stats records of a slug diverge.

    e.g. a link stored without its redirect counter, or vice versa.
    """

    pass
