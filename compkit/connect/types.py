"""
Discovery service interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .params import ConnectionParams


class Discovery(ABC):
    """
    Abstract base class for discovery services.

    A discovery service maps a logical key to one or more connections.
    Implementations may perform I/O, so every call is a suspension point.
    """

    @abstractmethod
    async def register(self, correlation_id: Optional[str], key: str,
                       connection: ConnectionParams) -> ConnectionParams:
        """Register connection parameters under a discovery key."""
        pass

    @abstractmethod
    async def resolve_one(self, correlation_id: Optional[str], key: str) -> Optional[ConnectionParams]:
        """Resolve a single connection by its key, or None when nothing is registered."""
        pass

    @abstractmethod
    async def resolve_all(self, correlation_id: Optional[str], key: str) -> List[ConnectionParams]:
        """Resolve every connection registered under a key."""
        pass
