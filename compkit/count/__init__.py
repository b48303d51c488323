"""
Package count provides performance counters.

This package implements:
- Counter types, counters and timings
- Cached counters with periodic dumps and resets
- Null, log and composite counters
- Counters factory
"""

from .types import (
    CounterType,
    Counter,
    Counters,
    Timing
)

from .cached import CachedCounters

from .null import NullCounters

from .log import LogCounters

from .composite import CompositeCounters

from .factory import DefaultCountersFactory

__all__ = [
    # Types
    'CounterType',
    'Counter',
    'Counters',
    'Timing',

    # Implementations
    'CachedCounters',
    'NullCounters',
    'LogCounters',
    'CompositeCounters',

    # Factory
    'DefaultCountersFactory',
]
