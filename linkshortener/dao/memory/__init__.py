from linkshortener.dao.memory.link_memory_dao import LinkMemoryDAO
from linkshortener.dao.memory.mixins import LockMixin


__all__ = [
    'LinkMemoryDAO',
    'LockMixin',
]
