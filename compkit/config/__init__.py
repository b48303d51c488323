"""
Package config provides configuration parameters and config readers.

This package implements:
- ConfigParams, the ordered string map with dotted sections
- Configurable / Reconfigurable component interfaces
- Memory, JSON and YAML config readers with template parameters
- Config reader factory
"""

from .params import (
    # Parameters
    ConfigParams,
    expand_template,
    to_nullable_string,
    to_nullable_boolean,
    to_nullable_integer,
    to_nullable_float
)

from .types import (
    # Interfaces
    Configurable,
    Reconfigurable,
    ConfigReader,
    FileConfigReader
)

from .memory import MemoryConfigReader

from .file import (
    JsonConfigReader,
    YamlConfigReader
)

from .factory import DefaultConfigReaderFactory

__all__ = [
    # Parameters
    'ConfigParams',
    'expand_template',
    'to_nullable_string',
    'to_nullable_boolean',
    'to_nullable_integer',
    'to_nullable_float',

    # Interfaces
    'Configurable',
    'Reconfigurable',
    'ConfigReader',
    'FileConfigReader',

    # Implementations
    'MemoryConfigReader',
    'JsonConfigReader',
    'YamlConfigReader',

    # Factory
    'DefaultConfigReaderFactory',
]
