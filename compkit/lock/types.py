"""
Lock interfaces and the shared acquisition protocol.

Protocol implemented by Lock.acquire_lock:

1. Compute ``deadline = now + timeout``.
2. Try to acquire the lock once. Return on success.
3. Sleep ``retry_timeout`` milliseconds.
4. If ``now > deadline`` raise LockTimeoutError carrying the key.
5. Try again. Return on success, otherwise go to 3.

Exactly one outcome is delivered per call. Cancelling the awaiting task
stops the polling.
"""

import asyncio
import logging
from abc import abstractmethod
from typing import Optional

from ..config import ConfigParams, Reconfigurable
from ..errors import LockTimeoutError
from ..util import current_time_millis


logger = logging.getLogger(__name__)


class Lock(Reconfigurable):
    """
    Abstract base class for resource locks keyed by string.

    Subclasses implement ``try_acquire_lock`` and ``release_lock``;
    ``acquire_lock`` polls ``try_acquire_lock`` until success or timeout.

    Configuration parameters:
        options.retry_timeout: Polling interval in milliseconds (default 100)
    """

    DEFAULT_RETRY_TIMEOUT = 100

    def __init__(self):
        self._retry_timeout = self.DEFAULT_RETRY_TIMEOUT

    def configure(self, config: ConfigParams) -> None:
        self._retry_timeout = config.get_as_integer_with_default(
            "options.retry_timeout", self._retry_timeout
        )

    @property
    def retry_timeout(self) -> int:
        return self._retry_timeout

    @abstractmethod
    async def try_acquire_lock(self, correlation_id: Optional[str], key: str, ttl: int) -> bool:
        """
        Make a single attempt to acquire a lock.

        Args:
            correlation_id: Transaction id to trace the call
            key: Key of the locked resource
            ttl: Lock time to live in milliseconds

        Returns:
            True if the lock was acquired, False if it is held by someone else
        """
        pass

    @abstractmethod
    async def release_lock(self, correlation_id: Optional[str], key: str) -> None:
        """Release a lock. Releasing a free lock is a no-op."""
        pass

    async def acquire_lock(self, correlation_id: Optional[str], key: str,
                           ttl: int, timeout: int) -> None:
        """
        Acquire a lock, retrying until the timeout expires.

        Args:
            correlation_id: Transaction id to trace the call
            key: Key of the locked resource
            ttl: Lock time to live in milliseconds
            timeout: How long to keep retrying, in milliseconds

        Raises:
            LockTimeoutError: If the lock was not acquired before the timeout
        """
        retry_time = current_time_millis() + timeout

        if await self.try_acquire_lock(correlation_id, key, ttl):
            return

        while True:
            await asyncio.sleep(self._retry_timeout / 1000.0)

            if current_time_millis() > retry_time:
                logger.debug(f"Acquiring lock {key} timed out after {timeout} ms")
                raise LockTimeoutError(correlation_id, key)

            if await self.try_acquire_lock(correlation_id, key, ttl):
                return
