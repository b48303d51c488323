"""
Package auth provides credential parameters and their resolution.

This package implements:
- CredentialParams with store keys
- Credential store interface
- In-memory credential store
- CredentialResolver over configured credentials and credential stores
- Credential store factory
"""

from .params import CredentialParams

from .types import CredentialStore

from .memory import MemoryCredentialStore

from .resolver import CredentialResolver

from .factory import DefaultCredentialStoreFactory

__all__ = [
    'CredentialParams',
    'CredentialStore',
    'MemoryCredentialStore',
    'CredentialResolver',
    'DefaultCredentialStoreFactory',
]
