"""
In-memory config reader.
Serves configuration held in memory, useful for testing and embedded setups.
"""

from typing import Optional

from .params import ConfigParams
from .types import ConfigReader, Reconfigurable


class MemoryConfigReader(ConfigReader, Reconfigurable):
    """
    Config reader that stores configuration in memory.

    Example:
        reader = MemoryConfigReader(ConfigParams.from_tuples(
            "connection.host", "{{ host }}",
            "connection.port", "8080"
        ))
        config = await reader.read_config(None, ConfigParams.from_tuples("host", "localhost"))
    """

    def __init__(self, config: Optional[ConfigParams] = None):
        super().__init__()
        self._config = ConfigParams(config)

    def configure(self, config: ConfigParams) -> None:
        self._config = ConfigParams(config)

    async def read_config(self, correlation_id: Optional[str],
                          parameters: Optional[ConfigParams] = None) -> ConfigParams:
        if parameters is not None:
            content = self._parameterize(str(self._config), parameters)
            return ConfigParams.from_string(content)

        return ConfigParams(self._config)
