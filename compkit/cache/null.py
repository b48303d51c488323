"""
Null cache implementation.
"""

from typing import Any, Optional

from .types import Cache


class NullCache(Cache):
    """Cache that stores nothing. Can be used to cut dependencies while testing."""

    async def retrieve(self, correlation_id: Optional[str], key: str) -> Any:
        return None

    async def store(self, correlation_id: Optional[str], key: str, value: Any,
                    timeout: Optional[int] = None) -> Any:
        return value

    async def remove(self, correlation_id: Optional[str], key: str) -> None:
        pass
