"""
Cache interfaces and cache entries.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..util import current_time_millis


class CacheEntry:
    """
    Single value stored in a cache together with its expiration time.

    Value and expiration are always updated together.
    """

    def __init__(self, key: str, value: Any, timeout: int):
        """
        Create a cache entry.

        Args:
            key: Unique key of the entry
            value: Cached value
            timeout: Time to live in milliseconds
        """
        self._key = key
        self._value = value
        self._expiration = current_time_millis() + timeout

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    @property
    def expiration(self) -> int:
        """Absolute expiration timestamp in milliseconds."""
        return self._expiration

    def set_value(self, value: Any, timeout: int) -> None:
        """Replace the value and restart the expiration timeout."""
        self._value = value
        self._expiration = current_time_millis() + timeout

    def is_expired(self) -> bool:
        return self._expiration < current_time_millis()

    def __repr__(self) -> str:
        return f"CacheEntry(key={self._key!r}, expiration={self._expiration})"


class Cache(ABC):
    """Abstract base class for transient key-value caches."""

    @abstractmethod
    async def retrieve(self, correlation_id: Optional[str], key: str) -> Any:
        """
        Retrieve a value by its key.

        Returns:
            The cached value, or None if it is missing or expired
        """
        pass

    @abstractmethod
    async def store(self, correlation_id: Optional[str], key: str, value: Any,
                    timeout: Optional[int] = None) -> Any:
        """
        Store a value under a key.

        Args:
            correlation_id: Transaction id to trace the call
            key: Unique key of the value
            value: Value to store. None removes the key
            timeout: Expiration timeout in milliseconds, the cache default when not positive

        Returns:
            The stored value
        """
        pass

    @abstractmethod
    async def remove(self, correlation_id: Optional[str], key: str) -> None:
        """Remove a value by its key."""
        pass
