"""
Factory for lock components.
"""

from ..build import Factory
from ..refer import Descriptor
from .memory import MemoryLock
from .null import NullLock


class DefaultLockFactory(Factory):
    """Creates NullLock and MemoryLock components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "lock", "default", "1.0")
    NULL_LOCK_DESCRIPTOR = Descriptor("compkit", "lock", "null", "*", "1.0")
    MEMORY_LOCK_DESCRIPTOR = Descriptor("compkit", "lock", "memory", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.NULL_LOCK_DESCRIPTOR, NullLock)
        self.register_as_type(self.MEMORY_LOCK_DESCRIPTOR, MemoryLock)
