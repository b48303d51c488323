"""
Factory for performance counters components.
"""

from ..build import Factory
from ..refer import Descriptor
from .composite import CompositeCounters
from .log import LogCounters
from .null import NullCounters


class DefaultCountersFactory(Factory):
    """Creates NullCounters, LogCounters and CompositeCounters components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "counters", "default", "1.0")
    NULL_COUNTERS_DESCRIPTOR = Descriptor("compkit", "counters", "null", "*", "1.0")
    LOG_COUNTERS_DESCRIPTOR = Descriptor("compkit", "counters", "log", "*", "1.0")
    COMPOSITE_COUNTERS_DESCRIPTOR = Descriptor("compkit", "counters", "composite", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.NULL_COUNTERS_DESCRIPTOR, NullCounters)
        self.register_as_type(self.LOG_COUNTERS_DESCRIPTOR, LogCounters)
        self.register_as_type(self.COMPOSITE_COUNTERS_DESCRIPTOR, CompositeCounters)
