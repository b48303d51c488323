"""
Counters that forward values to every counters component in references.
"""

from datetime import datetime
from typing import List, Optional

from ..refer import Descriptor, Referenceable, References
from .types import Counters, Timing


class CompositeCounters(Counters, Referenceable):
    """
    Aggregates all counters found in references into one.

    References:
        *:counters:*:*:* Counters to forward values to
    """

    COUNTERS_DESCRIPTOR = Descriptor("*", "counters", "*", "*", "*")

    def __init__(self, references: Optional[References] = None):
        self._counters: List[Counters] = []

        if references is not None:
            self.set_references(references)

    def set_references(self, references: References) -> None:
        for counters in references.get_optional(self.COUNTERS_DESCRIPTOR):
            if counters is not self:
                self._counters.append(counters)

    def begin_timing(self, name: str) -> Timing:
        return Timing(name, self)

    def end_timing(self, name: str, elapsed: float) -> None:
        for counters in self._counters:
            counters.end_timing(name, elapsed)

    def stats(self, name: str, value: float) -> None:
        for counters in self._counters:
            counters.stats(name, value)

    def last(self, name: str, value: float) -> None:
        for counters in self._counters:
            counters.last(name, value)

    def timestamp_now(self, name: str) -> None:
        self.timestamp(name, datetime.now())

    def timestamp(self, name: str, value: datetime) -> None:
        for counters in self._counters:
            counters.timestamp(name, value)

    def increment_one(self, name: str) -> None:
        self.increment(name, 1)

    def increment(self, name: str, value: int) -> None:
        for counters in self._counters:
            counters.increment(name, value)
