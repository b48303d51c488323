"""
Package lock provides mutual exclusion for external resources.

The locks in this package are single-process and in-memory. They guard
resources across logical operations that interleave at await points; they
do not coordinate separate hosts.
"""

from .types import Lock

from .memory import MemoryLock

from .null import NullLock

from .factory import DefaultLockFactory

from ..errors import LockTimeoutError

__all__ = [
    'Lock',
    'MemoryLock',
    'NullLock',
    'DefaultLockFactory',
    'LockTimeoutError',
]
