"""
Credential store interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .params import CredentialParams


class CredentialStore(ABC):
    """Abstract base class for secure credential stores."""

    @abstractmethod
    async def store(self, correlation_id: Optional[str], key: str,
                    credential: Optional[CredentialParams]) -> None:
        """Store a credential under a key. Storing None removes the key."""
        pass

    @abstractmethod
    async def lookup(self, correlation_id: Optional[str], key: str) -> Optional[CredentialParams]:
        """Look up a credential by its key, or None when it is not stored."""
        pass
