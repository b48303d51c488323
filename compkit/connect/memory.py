"""
In-memory discovery service implementation.
Holds connections registered statically via configuration or dynamically at runtime.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..config import ConfigParams, Reconfigurable
from .params import ConnectionParams
from .types import Discovery


logger = logging.getLogger(__name__)


@dataclass
class DiscoveryItem:
    """A connection registered under a discovery key."""
    key: str
    connection: ConnectionParams


class MemoryDiscovery(Discovery, Reconfigurable):
    """
    Discovery service that keeps connections in memory.

    Each top-level configuration key becomes one entry whose value is parsed
    as a connection string. Several entries may share a key, which lets a
    logical service expose multiple addresses.

    Example:
        discovery = MemoryDiscovery(ConfigParams.from_tuples(
            "key1", "host=10.1.1.100;port=8080",
            "key2", "host=10.1.1.101;port=8082"
        ))
        connection = await discovery.resolve_one(None, "key1")
    """

    def __init__(self, config: Optional[ConfigParams] = None):
        self._items: List[DiscoveryItem] = []

        if config is not None:
            self.configure(config)

    def configure(self, config: ConfigParams) -> None:
        self.read_connections(config)

    def read_connections(self, connections: ConfigParams) -> None:
        """Replace all entries with connections read from configuration."""
        self._items = []

        for key in connections.keys():
            value = connections.get_as_nullable_string(key)
            self._items.append(DiscoveryItem(key, ConnectionParams.from_string(value)))

    async def register(self, correlation_id: Optional[str], key: str,
                       connection: ConnectionParams) -> ConnectionParams:
        self._items.append(DiscoveryItem(key, connection))
        logger.debug(f"Registered connection under discovery key {key}")
        return connection

    async def resolve_one(self, correlation_id: Optional[str], key: str) -> Optional[ConnectionParams]:
        for item in self._items:
            if item.key == key and item.connection is not None:
                return item.connection
        return None

    async def resolve_all(self, correlation_id: Optional[str], key: str) -> List[ConnectionParams]:
        return [
            item.connection for item in self._items
            if item.key == key and item.connection is not None
        ]
