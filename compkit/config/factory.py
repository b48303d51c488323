"""
Factory for config reader components.
"""

from ..build import Factory
from ..refer import Descriptor
from .file import JsonConfigReader, YamlConfigReader
from .memory import MemoryConfigReader


class DefaultConfigReaderFactory(Factory):
    """Creates MemoryConfigReader, JsonConfigReader and YamlConfigReader components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "config-reader", "default", "1.0")
    MEMORY_CONFIG_READER_DESCRIPTOR = Descriptor("compkit", "config-reader", "memory", "*", "1.0")
    JSON_CONFIG_READER_DESCRIPTOR = Descriptor("compkit", "config-reader", "json", "*", "1.0")
    YAML_CONFIG_READER_DESCRIPTOR = Descriptor("compkit", "config-reader", "yaml", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.MEMORY_CONFIG_READER_DESCRIPTOR, MemoryConfigReader)
        self.register_as_type(self.JSON_CONFIG_READER_DESCRIPTOR, JsonConfigReader)
        self.register_as_type(self.YAML_CONFIG_READER_DESCRIPTOR, YamlConfigReader)
