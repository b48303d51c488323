"""
Counters that dump their values to loggers.
"""

from typing import List

from ..log import CompositeLogger
from ..refer import Referenceable, References
from .cached import CachedCounters
from .types import Counter


class LogCounters(CachedCounters, Referenceable):
    """
    Writes counters at INFO level to the loggers found in references.

    References:
        *:logger:*:*:* Loggers to write counters to
    """

    def __init__(self):
        super().__init__()
        self._logger = CompositeLogger()

    def set_references(self, references: References) -> None:
        self._logger.set_references(references)

    @staticmethod
    def _counter_to_string(counter: Counter) -> str:
        result = f'Counter {counter.name} {{ "type": {counter.type.value}'
        if counter.last is not None:
            result += f', "last": {counter.last}'
        if counter.count is not None:
            result += f', "count": {counter.count}'
        if counter.min is not None:
            result += f', "min": {counter.min}'
        if counter.max is not None:
            result += f', "max": {counter.max}'
        if counter.average is not None:
            result += f', "avg": {counter.average}'
        if counter.time is not None:
            result += f', "time": {counter.time.isoformat()}'
        result += " }"
        return result

    def _save(self, counters: List[Counter]) -> None:
        for counter in sorted(counters, key=lambda c: c.name):
            self._logger.info(None, self._counter_to_string(counter))
