"""
Logger that buffers messages and saves them in batches.
"""

import logging
from abc import abstractmethod
from datetime import datetime
from typing import List, Optional

from ..config import ConfigParams
from ..util import current_time_millis
from .types import Logger, LogLevel, LogMessage, level_to_string


logger = logging.getLogger(__name__)


class CachedLogger(Logger):
    """
    Abstract logger that keeps messages in memory and periodically saves them.

    Messages are saved on the first write after ``options.interval`` has
    passed since the previous dump. If saving fails, the messages are put back
    and the cache is truncated to ``options.max_cache_size`` newest entries.

    Configuration parameters:
        level: Maximum level to write
        source: Source name attached to messages
        options.interval: Dump interval in milliseconds (default 10000)
        options.max_cache_size: Maximum number of kept messages (default 100)
    """

    def __init__(self):
        super().__init__()
        self._cache: List[LogMessage] = []
        self._updated = False
        self._last_dump_time = current_time_millis()
        self._max_cache_size = 100
        self._interval = 10000

    def configure(self, config: ConfigParams) -> None:
        super().configure(config)
        self._interval = config.get_as_integer_with_default("options.interval", self._interval)
        self._max_cache_size = config.get_as_integer_with_default(
            "options.max_cache_size", self._max_cache_size
        )

    def _write(self, level: LogLevel, correlation_id: Optional[str],
               error: Optional[BaseException], message: str) -> None:
        self._cache.append(LogMessage(
            time=datetime.now(),
            source=self._source,
            level=level_to_string(level),
            correlation_id=correlation_id,
            error=self._compose_error(error) if error is not None else None,
            message=message
        ))

        self._update()

    @abstractmethod
    def _save(self, messages: List[LogMessage]) -> None:
        """Persist a batch of messages. Raise on failure."""
        pass

    def clear(self) -> None:
        self._cache = []
        self._updated = False

    def dump(self) -> None:
        """Save all cached messages."""
        if not self._updated:
            return

        messages = self._cache
        self._cache = []

        try:
            self._save(messages)
        except Exception as e:
            logger.warning(f"Failed to save {len(messages)} log messages: {e}")
            self._cache = messages + self._cache
            delete_count = len(self._cache) - self._max_cache_size
            if delete_count > 0:
                self._cache = self._cache[delete_count:]

        self._updated = False
        self._last_dump_time = current_time_millis()

    def _update(self) -> None:
        self._updated = True

        if current_time_millis() > self._last_dump_time + self._interval:
            self.dump()
