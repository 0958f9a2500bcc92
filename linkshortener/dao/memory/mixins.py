"""Locking mixin providing shared lock initialization for in-process DAOs.

Responsibilities:
    - Initialize a re-entrant lock
    - Expose the lock as a transaction context

Classes:
    - LockMixin: Base mixin to inject a lock and transaction() into a DAO.

Example:
    Typical usage with a DAO implementation:

        >>> class LinkMemoryDAO(LockMixin, LinkBaseDAO):
        ...     pass
        ...
        >>> dao = LinkMemoryDAO()
        >>> with dao.transaction():
        ...     dao.contains('abc123')
        False
"""

import threading
from contextlib import contextmanager, AbstractContextManager
from collections.abc import Iterator
from typing import Optional


class LockMixin:
    """Mixin lock setup for DAOs that keep their state in process memory.

    Attributes:
        lock (threading.RLock):
            Re-entrant lock serializing every access to the DAO's state.

    Methods:
        transaction() -> Iterator[None]:
            Hold the lock for the duration of a `with` block.
    """

    def __init__(self, lock: Optional[AbstractContextManager] = None):
        """Initialize the DAO lock

        Args:
            lock (Optional[AbstractContextManager]):
                Pre-initialized re-entrant lock. If None, a new one is created.
                Must be re-entrant, since DAO methods take it again inside
                a transaction.
        """
        self.lock = lock if lock is not None else threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold exclusive access to the DAO until the `with` block exits

        Example:
            >>> with dao.transaction():
            ...     if not dao.contains(link.slug):
            ...         dao.insert(link, Stats(link=link))
        """
        with self.lock:
            yield
