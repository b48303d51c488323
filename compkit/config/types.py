"""
Configuration interfaces and base config readers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .params import ConfigParams, expand_template


class Configurable(ABC):
    """Component that is configured once with ConfigParams."""

    @abstractmethod
    def configure(self, config: ConfigParams) -> None:
        """Configure the component with parameters."""
        pass


class Reconfigurable(Configurable):
    """Component that may be configured again after construction."""
    pass


class ConfigReader(Configurable):
    """
    Abstract base class for configuration readers.

    Readers may render their source as a template before parsing it:
    ``{{ name }}`` placeholders are replaced with default parameters from the
    ``parameters`` section of the reader's own configuration, overridden by
    the parameters passed to ``read_config``.
    """

    def __init__(self):
        self._parameters = ConfigParams()

    def configure(self, config: ConfigParams) -> None:
        parameters = config.get_section("parameters")
        if len(parameters) > 0:
            self._parameters = parameters

    @abstractmethod
    async def read_config(self, correlation_id: Optional[str],
                          parameters: Optional[ConfigParams] = None) -> ConfigParams:
        """Read configuration and parameterize it with the given values."""
        pass

    def _parameterize(self, config: str, parameters: Optional[ConfigParams]) -> str:
        parameters = self._parameters.override(parameters)
        return expand_template(config, parameters)


class FileConfigReader(ConfigReader):
    """Abstract config reader that reads from a file."""

    def __init__(self, path: Optional[str] = None):
        super().__init__()
        self._path = path

    @property
    def path(self) -> Optional[str]:
        return self._path

    @path.setter
    def path(self, value: Optional[str]) -> None:
        self._path = value

    def configure(self, config: ConfigParams) -> None:
        super().configure(config)
        self._path = config.get_as_string_with_default("path", self._path)
