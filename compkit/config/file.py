"""
File-based config readers for JSON and YAML configuration files.
"""

import json
import logging
from abc import abstractmethod
from typing import Any, Optional

import aiofiles
import yaml

from ..errors import ConfigError, FileError
from .params import ConfigParams
from .types import FileConfigReader


logger = logging.getLogger(__name__)


class _TextFileConfigReader(FileConfigReader):
    """Reads a text file, renders it as a template and parses the result."""

    @abstractmethod
    def _parse(self, content: str) -> Any:
        """Parse rendered file content into a nested object."""
        pass

    async def read_object(self, correlation_id: Optional[str],
                          parameters: Optional[ConfigParams] = None) -> Any:
        """
        Read the configuration file and parse it into a nested object.

        Raises:
            ConfigError: If the path is not set
            FileError: If the file cannot be read or parsed
        """
        if self.path is None:
            raise ConfigError("Missing config file path", "NO_PATH", correlation_id)

        try:
            async with aiofiles.open(self.path, 'r', encoding='utf-8') as f:
                content = await f.read()
            content = self._parameterize(content, parameters)
            return self._parse(content)
        except Exception as e:
            raise FileError(
                f"Failed reading configuration {self.path}: {e}",
                "READ_FAILED",
                correlation_id
            ).with_details("path", self.path).with_cause(e)

    async def read_config(self, correlation_id: Optional[str],
                          parameters: Optional[ConfigParams] = None) -> ConfigParams:
        value = await self.read_object(correlation_id, parameters)
        config = ConfigParams.from_value(value)
        logger.debug(f"Read {len(config)} configuration parameters from {self.path}")
        return config

    @classmethod
    async def read_config_file(cls, correlation_id: Optional[str], path: str,
                               parameters: Optional[ConfigParams] = None) -> ConfigParams:
        """Read a configuration file in one call."""
        return await cls(path).read_config(correlation_id, parameters)


class JsonConfigReader(_TextFileConfigReader):
    """Config reader for JSON files."""

    def _parse(self, content: str) -> Any:
        return json.loads(content) if content.strip() else None


class YamlConfigReader(_TextFileConfigReader):
    """Config reader for YAML files."""

    def _parse(self, content: str) -> Any:
        return yaml.safe_load(content)
