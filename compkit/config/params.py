"""
Configuration parameters for compkit components.

ConfigParams is an ordered string map whose keys may encode hierarchical
sections with dots (``connection.host``). It is the value carrier for
component configuration, connection parameters and credentials.
"""

import os
import re
from typing import Any, List, Mapping, Optional


SECTION_SEPARATOR = "."

_TRUE_VALUES = ('true', '1', 'yes', 'on', 't', 'y')
_FALSE_VALUES = ('false', '0', 'no', 'off', 'f', 'n')


def to_nullable_string(value: Any) -> Optional[str]:
    """Convert a value to its configuration string form."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_nullable_boolean(value: Any) -> Optional[bool]:
    """Convert a configuration value to a boolean, or None when not convertible."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def to_nullable_integer(value: Any) -> Optional[int]:
    """Convert a configuration value to an integer, or None when not convertible."""
    if value is None:
        return None
    try:
        return int(float(value))
    except (ValueError, TypeError, OverflowError):
        return None


def to_nullable_float(value: Any) -> Optional[float]:
    """Convert a configuration value to a float, or None when not convertible."""
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


class ConfigParams(dict):
    """
    Ordered map of configuration parameters.

    Values are kept as strings and converted on read. Item assignment,
    ``put``, ``update`` and ``setdefault`` all convert values to strings;
    ``|`` returns a plain dict. Keys with dots describe sections, so
    ``connections.0.host=a`` belongs to the ``connections`` section and its
    ``0`` sub-section.

    Example:
        config = ConfigParams.from_tuples(
            "connection.host", "localhost",
            "connection.port", 8080
        )
        config.get_section("connection").get_as_integer("port")  # 8080
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        super().__init__()
        if values is not None:
            for key, value in values.items():
                self.put(key, value)

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(key, to_nullable_string(value))

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self.put(key, value)

    def setdefault(self, key: str, default: Any = None) -> Optional[str]:
        if key not in self:
            self.put(key, default)
        return self[key]

    def __ior__(self, other: Mapping[str, Any]) -> "ConfigParams":
        self.update(other)
        return self

    def put(self, key: str, value: Any) -> None:
        """Set a parameter, converting its value to a string."""
        self[key] = value

    def remove(self, key: str) -> None:
        """Remove a parameter if present."""
        self.pop(key, None)

    def length(self) -> int:
        """Get the number of parameters."""
        return len(self)

    # Typed getters

    def get_as_nullable_string(self, key: str) -> Optional[str]:
        return self.get(key)

    def get_as_string(self, key: str) -> Optional[str]:
        return self.get(key)

    def get_as_string_with_default(self, key: str, default: Optional[str]) -> Optional[str]:
        value = self.get(key)
        return value if value is not None else default

    def get_as_nullable_integer(self, key: str) -> Optional[int]:
        return to_nullable_integer(self.get(key))

    def get_as_integer(self, key: str) -> int:
        return self.get_as_integer_with_default(key, 0)

    def get_as_integer_with_default(self, key: str, default: int) -> int:
        value = to_nullable_integer(self.get(key))
        return value if value is not None else default

    def get_as_nullable_float(self, key: str) -> Optional[float]:
        return to_nullable_float(self.get(key))

    def get_as_float(self, key: str) -> float:
        return self.get_as_float_with_default(key, 0.0)

    def get_as_float_with_default(self, key: str, default: float) -> float:
        value = to_nullable_float(self.get(key))
        return value if value is not None else default

    def get_as_nullable_boolean(self, key: str) -> Optional[bool]:
        return to_nullable_boolean(self.get(key))

    def get_as_boolean(self, key: str) -> bool:
        return self.get_as_boolean_with_default(key, False)

    def get_as_boolean_with_default(self, key: str, default: bool) -> bool:
        value = to_nullable_boolean(self.get(key))
        return value if value is not None else default

    # Sections

    def get_section_names(self) -> List[str]:
        """
        Get the names of all sections in first-seen order.

        A key without a separator is a section of its own. Names are
        de-duplicated case-insensitively.
        """
        sections: List[str] = []
        seen = set()

        for key in self.keys():
            pos = key.find(SECTION_SEPARATOR)
            section = key[:pos] if pos > 0 else key

            if section.lower() not in seen:
                seen.add(section.lower())
                sections.append(section)

        return sections

    def get_section(self, section: str) -> "ConfigParams":
        """Get the parameters of a section with the section prefix stripped."""
        result = ConfigParams()
        prefix = (section + SECTION_SEPARATOR).lower()

        for key, value in self.items():
            if len(key) < len(prefix):
                continue
            if key[:len(prefix)].lower() == prefix:
                result.put(key[len(prefix):], value)

        return result

    def add_section(self, section: str, section_params: Optional[Mapping[str, Any]]) -> None:
        """Add the parameters of another map as a named section."""
        if section is None:
            raise ValueError("Section name cannot be null")

        if section_params is None:
            return

        for key, value in section_params.items():
            name = key
            if len(name) > 0 and len(section) > 0:
                name = section + SECTION_SEPARATOR + name
            elif len(name) == 0:
                name = section
            self.put(name, value)

    def override(self, config_params: Optional[Mapping[str, Any]]) -> "ConfigParams":
        """Return a copy overridden by another map. The other map's keys win."""
        return ConfigParams.merge_configs(self, config_params)

    def set_defaults(self, default_config_params: Optional[Mapping[str, Any]]) -> "ConfigParams":
        """Return a copy with missing keys taken from the defaults."""
        return ConfigParams.merge_configs(default_config_params, self)

    # Rendering

    def __str__(self) -> str:
        parts = []
        for key, value in self.items():
            if value is None:
                parts.append(key)
            else:
                parts.append(f"{key}={value}")
        return ";".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict.__repr__(self)})"

    # Constructors

    @classmethod
    def merge_configs(cls, *configs: Optional[Mapping[str, Any]]) -> "ConfigParams":
        """
        Merge multiple configuration maps.
        Later configs override earlier ones.
        """
        result = cls()

        for config in configs:
            if config is not None:
                for key, value in config.items():
                    result.put(key, value)

        return result

    @classmethod
    def from_tuples(cls, *tuples: Any) -> "ConfigParams":
        """Create parameters from a flat key, value, key, value sequence."""
        result = cls()

        for index in range(0, len(tuples) - 1, 2):
            result.put(str(tuples[index]), tuples[index + 1])

        return result

    @classmethod
    def from_string(cls, line: Optional[str]) -> "ConfigParams":
        """
        Parse parameters from a ``key1=value1;key2=value2`` string.
        A token without ``=`` is stored with a None value.
        """
        result = cls()

        if not line:
            return result

        for token in line.split(";"):
            if len(token) == 0:
                continue

            index = token.find("=")
            key = token[:index] if index > 0 else token
            value = token[index + 1:] if index > 0 else None
            result.put(key.strip(), value.strip() if value is not None else None)

        return result

    @classmethod
    def from_value(cls, value: Any) -> "ConfigParams":
        """
        Flatten a nested structure of dicts and lists into dotted keys.
        List indexes become section names.
        """
        result = cls()
        result._flatten("", value)
        return result

    @classmethod
    def from_env(cls, prefix: str = "COMPKIT_",
                 environ: Optional[Mapping[str, str]] = None) -> "ConfigParams":
        """
        Load parameters from environment variables with the given prefix.

        The prefix is removed, names are lowercased and double underscores
        separate sections, so ``COMPKIT_CONNECTION__HOST`` becomes
        ``connection.host``.
        """
        if environ is None:
            environ = os.environ

        result = cls()

        for key, value in environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower().replace("__", SECTION_SEPARATOR)
                result.put(config_key, value)

        return result

    def _flatten(self, prefix: str, value: Any) -> None:
        if isinstance(value, Mapping):
            for key, item in value.items():
                self._flatten(self._join(prefix, str(key)), item)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                self._flatten(self._join(prefix, str(index)), item)
        elif prefix:
            self.put(prefix, value)

    @staticmethod
    def _join(prefix: str, key: str) -> str:
        return prefix + SECTION_SEPARATOR + key if prefix else key


_TEMPLATE_PATTERN = re.compile(r'\{\{\s*([^{}\s]+)\s*\}\}')


def expand_template(template: str, parameters: Optional[Mapping[str, Any]]) -> str:
    """
    Expand ``{{ name }}`` placeholders in a configuration template.
    Unknown names render as empty strings.
    """
    if parameters is None:
        parameters = {}

    def replace_var(match):
        value = parameters.get(match.group(1))
        return to_nullable_string(value) or ""

    return _TEMPLATE_PATTERN.sub(replace_var, template)