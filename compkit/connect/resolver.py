"""
Connection resolver.

Holds connections read from configuration and resolves those that carry
only a discovery key through the discovery services found in references.
"""

import logging
from typing import List, Optional

from ..config import ConfigParams
from ..errors import ReferenceMissingError
from ..refer import Descriptor, Referenceable, References
from .params import ConnectionParams


logger = logging.getLogger(__name__)


class ConnectionResolver(Referenceable):
    """
    Resolves connections from configuration with optional discovery lookup.

    A connection that has host, port or uri is returned as is. A connection
    that only has ``discovery_key`` is sent to every discovery service
    registered in references until one of them resolves it.

    Configuration parameters:
        connection: Single connection section
            discovery_key: (optional) Key to resolve the connection in discovery
            protocol, host, port, uri: Connection address
        connections: Alternative section with several named connections

    References:
        *:discovery:*:*:* Discovery services used to resolve connections

    Example:
        resolver = ConnectionResolver(ConfigParams.from_tuples(
            "connection.host", "10.1.1.100",
            "connection.port", 8080
        ))
        connection = await resolver.resolve("123")
    """

    DISCOVERY_DESCRIPTOR = Descriptor("*", "discovery", "*", "*", "*")

    def __init__(self, config: Optional[ConfigParams] = None,
                 references: Optional[References] = None):
        self._connections: List[ConnectionParams] = []
        self._references: Optional[References] = None

        if config is not None:
            self.configure(config)
        if references is not None:
            self.set_references(references)

    def set_references(self, references: References) -> None:
        self._references = references

    def configure(self, config: ConfigParams) -> None:
        connections = ConnectionParams.many_from_config(config)
        self._connections.extend(connections)

    def get_all(self) -> List[ConnectionParams]:
        """Get all connections as configured, without resolving discovery keys."""
        return self._connections

    def add(self, connection: ConnectionParams) -> None:
        self._connections.append(connection)

    def _find_discoveries(self, correlation_id: Optional[str]) -> list:
        discoveries = self._references.get_optional(self.DISCOVERY_DESCRIPTOR)
        if len(discoveries) == 0:
            raise ReferenceMissingError(correlation_id, self.DISCOVERY_DESCRIPTOR)
        return discoveries

    async def _resolve_in_discovery(self, correlation_id: Optional[str],
                                    connection: ConnectionParams) -> Optional[ConnectionParams]:
        if not connection.use_discovery():
            return None

        if self._references is None:
            return None

        key = connection.get_discovery_key()

        for discovery in self._find_discoveries(correlation_id):
            result = await discovery.resolve_one(correlation_id, key)
            if result is not None:
                logger.debug(f"Resolved connection {key} in discovery")
                return result

        return None

    async def resolve(self, correlation_id: Optional[str]) -> Optional[ConnectionParams]:
        """
        Resolve a single connection.

        The first connection without a discovery key is returned immediately.
        Otherwise connections are resolved through discovery in order, and the
        first hit is merged over its configured entry.

        Raises:
            ReferenceMissingError: If discovery is needed but no discovery service is registered
        """
        if len(self._connections) == 0:
            return None

        for connection in self._connections:
            if not connection.use_discovery():
                return connection

        for connection in self._connections:
            result = await self._resolve_in_discovery(correlation_id, connection)
            if result is not None:
                return ConnectionParams(ConfigParams.merge_configs(connection, result))

        logger.debug(f"No connection could be resolved (correlation {correlation_id})")
        return None

    async def _resolve_all_in_discovery(self, correlation_id: Optional[str],
                                        connection: ConnectionParams) -> List[ConnectionParams]:
        if not connection.use_discovery():
            return []

        if self._references is None:
            return []

        key = connection.get_discovery_key()
        result: List[ConnectionParams] = []

        for discovery in self._find_discoveries(correlation_id):
            result.extend(await discovery.resolve_all(correlation_id, key))

        return result

    async def resolve_all(self, correlation_id: Optional[str]) -> List[ConnectionParams]:
        """
        Resolve all connections.

        Connections without a discovery key come first, followed by every
        connection found in discovery, each merged over its configured entry.
        """
        resolved: List[ConnectionParams] = []
        to_resolve: List[ConnectionParams] = []

        for connection in self._connections:
            if connection.use_discovery():
                to_resolve.append(connection)
            else:
                resolved.append(connection)

        for connection in to_resolve:
            for result in await self._resolve_all_in_discovery(correlation_id, connection):
                resolved.append(ConnectionParams(ConfigParams.merge_configs(connection, result)))

        return resolved

    async def _register_in_discovery(self, correlation_id: Optional[str],
                                     connection: ConnectionParams) -> bool:
        if not connection.use_discovery():
            return False

        if self._references is None:
            return False

        key = connection.get_discovery_key()

        for discovery in self._references.get_optional(self.DISCOVERY_DESCRIPTOR):
            await discovery.register(correlation_id, key, connection)

        return True

    async def register(self, correlation_id: Optional[str], connection: ConnectionParams) -> bool:
        """
        Register a connection in every discovery service and keep it locally.

        Returns:
            True if the connection was registered, False if it has no discovery
            key or no references are set
        """
        registered = await self._register_in_discovery(correlation_id, connection)

        if registered:
            self._connections.append(connection)
            logger.debug(f"Registered connection {connection.get_discovery_key()}")

        return registered
