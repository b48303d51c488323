"""
Counters that aggregate values in memory and save them periodically.
"""

import logging
from abc import abstractmethod
from datetime import datetime
from threading import Lock
from typing import Dict, List

from ..config import ConfigParams, Reconfigurable
from ..errors import InvalidArgumentError
from ..util import current_time_millis
from .types import Counter, Counters, CounterType, Timing


logger = logging.getLogger(__name__)


class CachedCounters(Counters, Reconfigurable):
    """
    Abstract counters that keep values in memory and dump them via ``_save``.

    Values are dumped on the first update after ``interval`` has passed since
    the previous dump. When ``reset_timeout`` is set, all counters are dropped
    once that much time has passed since the previous reset.

    Configuration parameters:
        interval: Dump interval in milliseconds (default 300000)
        reset_timeout: Reset interval in milliseconds, 0 to never reset (default 0)
    """

    DEFAULT_INTERVAL = 300000

    def __init__(self):
        self._interval = self.DEFAULT_INTERVAL
        self._reset_timeout = 0
        self._cache: Dict[str, Counter] = {}
        self._updated = False
        self._last_dump_time = current_time_millis()
        self._last_reset_time = current_time_millis()
        self._lock = Lock()

    def configure(self, config: ConfigParams) -> None:
        self._interval = config.get_as_integer_with_default("interval", self._interval)
        self._reset_timeout = config.get_as_integer_with_default("reset_timeout", self._reset_timeout)

    @property
    def interval(self) -> int:
        return self._interval

    @interval.setter
    def interval(self, value: int) -> None:
        self._interval = value

    @property
    def reset_timeout(self) -> int:
        return self._reset_timeout

    @reset_timeout.setter
    def reset_timeout(self, value: int) -> None:
        self._reset_timeout = value

    @abstractmethod
    def _save(self, counters: List[Counter]) -> None:
        pass

    def clear(self, name: str) -> None:
        with self._lock:
            self._cache.pop(name, None)

    def clear_all(self) -> None:
        with self._lock:
            self._cache = {}
            self._updated = False

    def begin_timing(self, name: str) -> Timing:
        return Timing(name, self)

    def dump(self) -> None:
        """Save all counters if anything changed since the last dump."""
        if not self._updated:
            return

        self._save(self.get_all())

        self._updated = False
        self._last_dump_time = current_time_millis()

    def _update(self) -> None:
        self._updated = True

        if current_time_millis() > self._last_dump_time + self._interval:
            try:
                self.dump()
            except Exception as e:
                logger.warning(f"Failed to dump counters: {e}")

    def _reset_if_needed(self) -> None:
        if self._reset_timeout == 0:
            return

        now = current_time_millis()
        if now - self._last_reset_time > self._reset_timeout:
            self._cache = {}
            self._updated = False
            self._last_reset_time = now

    def get_all(self) -> List[Counter]:
        with self._lock:
            self._reset_if_needed()
            return list(self._cache.values())

    def get(self, name: str, type: CounterType) -> Counter:
        """
        Get a counter by name, creating it when missing.
        A counter of a different type under the same name is replaced.
        """
        if not name:
            raise InvalidArgumentError("Counter name cannot be null", "NO_NAME")

        with self._lock:
            self._reset_if_needed()

            counter = self._cache.get(name)
            if counter is None or counter.type != type:
                counter = Counter(name, type)
                self._cache[name] = counter

            return counter

    @staticmethod
    def _calculate_stats(counter: Counter, value: float) -> None:
        counter.last = value
        counter.count = counter.count + 1 if counter.count is not None else 1
        counter.max = max(counter.max, value) if counter.max is not None else value
        counter.min = min(counter.min, value) if counter.min is not None else value
        if counter.average is not None and counter.count > 1:
            counter.average = (counter.average * (counter.count - 1) + value) / counter.count
        else:
            counter.average = value

    def end_timing(self, name: str, elapsed: float) -> None:
        counter = self.get(name, CounterType.INTERVAL)
        self._calculate_stats(counter, elapsed)
        self._update()

    def stats(self, name: str, value: float) -> None:
        counter = self.get(name, CounterType.STATISTICS)
        self._calculate_stats(counter, value)
        self._update()

    def last(self, name: str, value: float) -> None:
        counter = self.get(name, CounterType.LAST_VALUE)
        counter.last = value
        self._update()

    def timestamp_now(self, name: str) -> None:
        self.timestamp(name, datetime.now())

    def timestamp(self, name: str, value: datetime) -> None:
        counter = self.get(name, CounterType.TIMESTAMP)
        counter.time = value
        self._update()

    def increment_one(self, name: str) -> None:
        self.increment(name, 1)

    def increment(self, name: str, value: int) -> None:
        counter = self.get(name, CounterType.INCREMENT)
        counter.count = counter.count + value if counter.count is not None else value
        self._update()
