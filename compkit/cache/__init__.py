"""
Package cache provides transient key-value caches.

This package implements:
- Cache interface and cache entries
- Bounded, expiring in-memory cache
- Null cache for tests
- Cache factory
"""

from .types import (
    Cache,
    CacheEntry
)

from .memory import MemoryCache

from .null import NullCache

from .factory import DefaultCacheFactory

__all__ = [
    'Cache',
    'CacheEntry',
    'MemoryCache',
    'NullCache',
    'DefaultCacheFactory',
]
