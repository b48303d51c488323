"""
In-memory cache implementation.
Provides a bounded, expiring key-value cache for non-scaled deployments and testing.
"""

import logging
from typing import Any, Dict, Optional

from ..config import ConfigParams, Reconfigurable
from ..errors import InvalidArgumentError
from .types import Cache, CacheEntry


logger = logging.getLogger(__name__)


class MemoryCache(Cache, Reconfigurable):
    """
    Local in-memory cache.

    Entries expire after a timeout. When the number of entries exceeds the
    maximum size, expired entries are purged and the entry closest to
    expiration is evicted.

    Configuration parameters:
        timeout: Default entry timeout in milliseconds (default 60000)
        max_size: Maximum number of entries, 0 for unbounded (default 1000)

    Note: All data is lost when the process terminates.
    """

    DEFAULT_TIMEOUT = 60000
    DEFAULT_MAX_SIZE = 1000

    def __init__(self):
        self._cache: Dict[str, CacheEntry] = {}
        self._count = 0
        self._timeout = self.DEFAULT_TIMEOUT
        self._max_size = self.DEFAULT_MAX_SIZE

    def configure(self, config: ConfigParams) -> None:
        self._timeout = config.get_as_integer_with_default("timeout", self._timeout)
        self._max_size = config.get_as_integer_with_default("max_size", self._max_size)

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def max_size(self) -> int:
        return self._max_size

    def get_count(self) -> int:
        """Get the current number of cached entries."""
        return self._count

    def _cleanup(self) -> None:
        """
        Purge expired entries and shrink the cache to its maximum size by
        evicting the entry with the earliest expiration.
        """
        oldest: Optional[CacheEntry] = None
        expired_keys = []
        self._count = 0

        for key, entry in self._cache.items():
            if entry.is_expired():
                expired_keys.append(key)
            else:
                self._count += 1
                if oldest is None or oldest.expiration > entry.expiration:
                    oldest = entry

        for key in expired_keys:
            del self._cache[key]

        if self._count > self._max_size and oldest is not None:
            del self._cache[oldest.key]
            self._count -= 1
            logger.debug(f"Evicted cache entry {oldest.key}")

        if expired_keys:
            logger.debug(f"Cleaned up {len(expired_keys)} expired cache entries")

    async def retrieve(self, correlation_id: Optional[str], key: str) -> Any:
        if key is None:
            raise InvalidArgumentError("Key cannot be null", "NO_KEY", correlation_id)

        entry = self._cache.get(key)

        if entry is None:
            return None

        # Expiration is only enforced when the cache has a timeout
        if self._timeout > 0 and entry.is_expired():
            del self._cache[key]
            self._count -= 1
            return None

        return entry.value

    async def store(self, correlation_id: Optional[str], key: str, value: Any,
                    timeout: Optional[int] = None) -> Any:
        if key is None:
            raise InvalidArgumentError("Key cannot be null", "NO_KEY", correlation_id)

        entry = self._cache.get(key)

        # Storing None removes the entry
        if value is None:
            if entry is not None:
                del self._cache[key]
                self._count -= 1
            return None

        timeout = timeout if timeout is not None and timeout > 0 else self._timeout

        if entry is not None:
            entry.set_value(value, timeout)
        else:
            self._cache[key] = CacheEntry(key, value, timeout)
            self._count += 1

        if self._max_size > 0 and self._count > self._max_size:
            self._cleanup()

        return value

    async def remove(self, correlation_id: Optional[str], key: str) -> None:
        if key is None:
            raise InvalidArgumentError("Key cannot be null", "NO_KEY", correlation_id)

        if key in self._cache:
            del self._cache[key]
            self._count -= 1

    def clear(self) -> None:
        """Remove all entries. Useful for testing."""
        self._cache.clear()
        self._count = 0
