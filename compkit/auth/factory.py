"""
Factory for credential store components.
"""

from ..build import Factory
from ..refer import Descriptor
from .memory import MemoryCredentialStore


class DefaultCredentialStoreFactory(Factory):
    """Creates MemoryCredentialStore components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "credential-store", "default", "1.0")
    MEMORY_CREDENTIAL_STORE_DESCRIPTOR = Descriptor("compkit", "credential-store", "memory", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.MEMORY_CREDENTIAL_STORE_DESCRIPTOR, MemoryCredentialStore)
