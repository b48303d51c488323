"""
In-memory lock implementation for single-process deployments and testing.
"""

import logging
from typing import Dict, Optional

from ..util import current_time_millis
from .types import Lock


logger = logging.getLogger(__name__)


class MemoryLock(Lock):
    """
    Lock that keeps expiration timestamps of held keys in memory.

    A key is held while its expiration is in the future. Expired locks are
    free and can be taken over without being released.
    """

    def __init__(self):
        super().__init__()
        self._locks: Dict[str, int] = {}

    async def try_acquire_lock(self, correlation_id: Optional[str], key: str, ttl: int) -> bool:
        expire_time = self._locks.get(key)
        now = current_time_millis()

        if expire_time is None or expire_time < now:
            self._locks[key] = now + ttl
            logger.debug(f"Acquired lock {key} for {ttl} ms")
            return True

        return False

    async def release_lock(self, correlation_id: Optional[str], key: str) -> None:
        self._locks.pop(key, None)
