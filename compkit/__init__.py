"""
compkit Python Package

Component toolkit: configuration, connection and credential resolution,
caching, locking, logging and performance counters.
"""

__version__ = "0.1.0"
__author__ = "Mauricio Fernandez"
__email__ = "mauricio.fernandez@siemens.com"

from .config import ConfigParams
from .refer import Descriptor, References
from .connect import ConnectionParams, ConnectionResolver
from .auth import CredentialParams, CredentialResolver
from .cache import MemoryCache
from .lock import MemoryLock
from .component import Component

__all__ = [
    "ConfigParams",
    "Descriptor",
    "References",
    "ConnectionParams",
    "ConnectionResolver",
    "CredentialParams",
    "CredentialResolver",
    "MemoryCache",
    "MemoryLock",
    "Component",
]
