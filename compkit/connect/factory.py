"""
Factory for discovery components.
"""

from ..build import Factory
from ..refer import Descriptor
from .memory import MemoryDiscovery


class DefaultDiscoveryFactory(Factory):
    """Creates MemoryDiscovery components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "discovery", "default", "1.0")
    MEMORY_DISCOVERY_DESCRIPTOR = Descriptor("compkit", "discovery", "memory", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.MEMORY_DISCOVERY_DESCRIPTOR, MemoryDiscovery)
