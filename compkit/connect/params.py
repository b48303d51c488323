"""
Connection parameters.

Connection parameters are kept apart from credentials, which have stricter
storage requirements (see compkit.auth). A connection either carries its
full address or only a discovery key to be resolved by a discovery service.
"""

from typing import Any, List, Mapping, Optional

from ..config import ConfigParams


class ConnectionParams(ConfigParams):
    """
    Typed view over connection configuration.

    Recognized parameters:
        discovery_key: Key to resolve the connection in a discovery service
        protocol: Connection protocol
        host: Target host (``ip`` is accepted as an alias)
        port: Target port
        uri: Target URI
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        super().__init__(values)

    def use_discovery(self) -> bool:
        """Check whether the connection must be resolved through discovery."""
        return self.get_as_nullable_string("discovery_key") is not None

    def get_discovery_key(self) -> Optional[str]:
        return self.get_as_nullable_string("discovery_key")

    def set_discovery_key(self, value: Optional[str]) -> None:
        self.put("discovery_key", value)

    def get_protocol(self, default: Optional[str] = None) -> Optional[str]:
        return self.get_as_string_with_default("protocol", default)

    def set_protocol(self, value: Optional[str]) -> None:
        self.put("protocol", value)

    def get_host(self) -> Optional[str]:
        return self.get_as_nullable_string("host") or self.get_as_nullable_string("ip")

    def set_host(self, value: Optional[str]) -> None:
        self.put("host", value)

    def get_port(self) -> int:
        return self.get_as_integer("port")

    def set_port(self, value: int) -> None:
        self.put("port", value)

    def get_uri(self) -> Optional[str]:
        return self.get_as_nullable_string("uri")

    def set_uri(self, value: Optional[str]) -> None:
        self.put("uri", value)

    @classmethod
    def from_string(cls, line: Optional[str]) -> "ConnectionParams":
        return cls(ConfigParams.from_string(line))

    @classmethod
    def many_from_config(cls, config: ConfigParams) -> List["ConnectionParams"]:
        """
        Read connections from the ``connections`` section, one per sub-section,
        or from the single ``connection`` section when there are none.
        """
        result: List[ConnectionParams] = []

        connections = config.get_section("connections")

        for section in connections.get_section_names():
            connection = connections.get_section(section)
            if len(connection) > 0:
                result.append(cls(connection))

        if not result:
            connection = config.get_section("connection")
            if len(connection) > 0:
                result.append(cls(connection))

        return result

    @classmethod
    def from_config(cls, config: ConfigParams) -> Optional["ConnectionParams"]:
        """Read the first connection from configuration."""
        connections = cls.many_from_config(config)
        return connections[0] if connections else None
