"""
Null lock implementation.
"""

from typing import Optional

from .types import Lock


class NullLock(Lock):
    """Lock that always succeeds. Can be used to cut dependencies while testing."""

    async def try_acquire_lock(self, correlation_id: Optional[str], key: str, ttl: int) -> bool:
        return True

    async def acquire_lock(self, correlation_id: Optional[str], key: str,
                           ttl: int, timeout: int) -> None:
        pass

    async def release_lock(self, correlation_id: Optional[str], key: str) -> None:
        pass
