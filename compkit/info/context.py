"""
Context information about the running process.
"""

import socket
from datetime import datetime
from typing import Any, Mapping, Optional

from ..config import ConfigParams, Reconfigurable


class ContextInfo(Reconfigurable):
    """
    Name, description and start time of the running process.

    Loggers use the context name as their default source.

    Configuration parameters:
        name: Context name
        description: Context description
        properties: Section of arbitrary context properties
    """

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None):
        self._name = name or "unknown"
        self._description = description
        self._context_id = socket.gethostname()
        self._start_time = datetime.now()
        self._properties = ConfigParams()

    def configure(self, config: ConfigParams) -> None:
        self.name = config.get_as_string_with_default("name", self.name)
        self.description = config.get_as_string_with_default("description", self.description)
        self.properties = config.get_section("properties")

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value or "unknown"

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value

    @property
    def context_id(self) -> str:
        return self._context_id

    @context_id.setter
    def context_id(self, value: str) -> None:
        self._context_id = value

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @start_time.setter
    def start_time(self, value: Optional[datetime]) -> None:
        self._start_time = value or datetime.now()

    @property
    def uptime(self) -> int:
        """Milliseconds since the context started."""
        return int((datetime.now() - self._start_time).total_seconds() * 1000)

    @property
    def properties(self) -> ConfigParams:
        return self._properties

    @properties.setter
    def properties(self, value: Optional[Mapping[str, Any]]) -> None:
        self._properties = ConfigParams(value)

    @classmethod
    def from_config(cls, config: ConfigParams) -> "ContextInfo":
        result = cls()
        result.configure(config)
        return result
