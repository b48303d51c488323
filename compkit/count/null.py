"""
Counters that discard all values.
"""

from datetime import datetime

from .types import Counters, Timing


class NullCounters(Counters):
    """Dummy counters used when performance measurement is not needed."""

    def begin_timing(self, name: str) -> Timing:
        return Timing()

    def end_timing(self, name: str, elapsed: float) -> None:
        pass

    def stats(self, name: str, value: float) -> None:
        pass

    def last(self, name: str, value: float) -> None:
        pass

    def timestamp_now(self, name: str) -> None:
        pass

    def timestamp(self, name: str, value: datetime) -> None:
        pass

    def increment_one(self, name: str) -> None:
        pass

    def increment(self, name: str, value: int) -> None:
        pass
