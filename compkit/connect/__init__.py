"""
Package connect provides connection parameters and their resolution.

This package implements:
- ConnectionParams with discovery keys
- Discovery service interface
- In-memory discovery service
- ConnectionResolver over configured connections and discovery services
- Discovery factory
"""

from .params import ConnectionParams

from .types import Discovery

from .memory import (
    DiscoveryItem,
    MemoryDiscovery
)

from .resolver import ConnectionResolver

from .factory import DefaultDiscoveryFactory

__all__ = [
    'ConnectionParams',
    'Discovery',
    'DiscoveryItem',
    'MemoryDiscovery',
    'ConnectionResolver',
    'DefaultDiscoveryFactory',
]
