from linkshortener.dao.base import LinkBaseDAO
from linkshortener.dao.memory import LinkMemoryDAO


__all__ = [
    'LinkBaseDAO',
    'LinkMemoryDAO',
]
