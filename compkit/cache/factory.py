"""
Factory for cache components.
"""

from ..build import Factory
from ..refer import Descriptor
from .memory import MemoryCache
from .null import NullCache


class DefaultCacheFactory(Factory):
    """Creates NullCache and MemoryCache components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "cache", "default", "1.0")
    NULL_CACHE_DESCRIPTOR = Descriptor("compkit", "cache", "null", "*", "1.0")
    MEMORY_CACHE_DESCRIPTOR = Descriptor("compkit", "cache", "memory", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.MEMORY_CACHE_DESCRIPTOR, MemoryCache)
        self.register_as_type(self.NULL_CACHE_DESCRIPTOR, NullCache)
