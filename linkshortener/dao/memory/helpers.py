import functools
from typing import TypeVar, Any
from collections.abc import Callable


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def synchronized(method: F) -> F:
    """Wrap store-mutating or store-reading DAO methods in the DAO's lock

    Args:
        method (Callable[..., Any]):
            DAO method touching the store's mappings.

    Returns:
        Callable[..., Any]:
            Wrapped method which runs while holding `self.lock`.

    Example:
        >>> @synchronized
        ... def contains(self, slug):
        ...     return slug in self._links
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock:
            return method(self, *args, **kwargs)

    return wrapper
