"""
Performance counter types and the counters interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..util import current_time_millis


class CounterType(Enum):
    """Type of a performance counter."""
    INTERVAL = 0            # Elapsed time of an operation
    LAST_VALUE = 1          # Last recorded value
    STATISTICS = 2          # Min, max and average of recorded values
    TIMESTAMP = 3           # Time of the last event
    INCREMENT = 4           # Monotonic event counter


@dataclass
class Counter:
    """Data of a single performance counter."""
    name: str
    type: CounterType
    last: Optional[float] = None
    count: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None
    average: Optional[float] = None
    time: Optional[datetime] = None


class Timing:
    """
    Measures the elapsed time of an operation and reports it to its counters.

    Example:
        with counters.begin_timing("mymethod.exec_time"):
            ...
    """

    def __init__(self, counter: Optional[str] = None, callback: Optional["Counters"] = None):
        self._counter = counter
        self._callback = callback
        self._start = current_time_millis()

    def end_timing(self) -> None:
        if self._callback is not None:
            elapsed = current_time_millis() - self._start
            self._callback.end_timing(self._counter, elapsed)

    def __enter__(self) -> "Timing":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end_timing()


class Counters(ABC):
    """Interface for performance counters that measure execution metrics."""

    @abstractmethod
    def begin_timing(self, name: str) -> Timing:
        pass

    @abstractmethod
    def end_timing(self, name: str, elapsed: float) -> None:
        """Record the elapsed time of a timing started with begin_timing."""
        pass

    @abstractmethod
    def stats(self, name: str, value: float) -> None:
        pass

    @abstractmethod
    def last(self, name: str, value: float) -> None:
        pass

    @abstractmethod
    def timestamp_now(self, name: str) -> None:
        pass

    @abstractmethod
    def timestamp(self, name: str, value: datetime) -> None:
        pass

    @abstractmethod
    def increment_one(self, name: str) -> None:
        pass

    @abstractmethod
    def increment(self, name: str, value: int) -> None:
        pass
