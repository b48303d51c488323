"""
Component locators.

A Descriptor identifies a component by group, type, kind, name and version.
Any field may be a wildcard (``*`` or None), which lets one descriptor match
a whole family of components, e.g. every registered discovery service.
"""

from typing import Any, Optional

from ..errors import ConfigError


class Descriptor:
    """
    Locator of a component in a References registry.

    Example:
        locator = Descriptor("*", "discovery", "*", "*", "*")
        locator.match(Descriptor("compkit", "discovery", "memory", "default", "1.0"))  # True
    """

    def __init__(self, group: Optional[str], type: Optional[str], kind: Optional[str],
                 name: Optional[str], version: Optional[str]):
        self._group = None if group == "*" else group
        self._type = None if type == "*" else type
        self._kind = None if kind == "*" else kind
        self._name = None if name == "*" else name
        self._version = None if version == "*" else version

    @property
    def group(self) -> Optional[str]:
        return self._group

    @property
    def type(self) -> Optional[str]:
        return self._type

    @property
    def kind(self) -> Optional[str]:
        return self._kind

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def version(self) -> Optional[str]:
        return self._version

    @staticmethod
    def _match_field(field1: Optional[str], field2: Optional[str]) -> bool:
        return field1 is None or field2 is None or field1 == field2

    def match(self, descriptor: Any) -> bool:
        """Partially match this descriptor to another one. Wildcards match anything."""
        if not isinstance(descriptor, Descriptor):
            return False

        return (
            self._match_field(self._group, descriptor.group)
            and self._match_field(self._type, descriptor.type)
            and self._match_field(self._kind, descriptor.kind)
            and self._match_field(self._name, descriptor.name)
            and self._match_field(self._version, descriptor.version)
        )

    def exact_match(self, descriptor: Any) -> bool:
        """Match this descriptor to another one field by field, wildcards included."""
        if not isinstance(descriptor, Descriptor):
            return False

        return (
            self._group == descriptor.group
            and self._type == descriptor.type
            and self._kind == descriptor.kind
            and self._name == descriptor.name
            and self._version == descriptor.version
        )

    def is_complete(self) -> bool:
        """Check whether all fields are set, i.e. no wildcards are present."""
        return None not in (self._group, self._type, self._kind, self._name, self._version)

    def __eq__(self, other: Any) -> bool:
        return self.exact_match(other)

    def __hash__(self) -> int:
        return hash((self._group, self._type, self._kind, self._name, self._version))

    def __str__(self) -> str:
        return ":".join(
            field if field is not None else "*"
            for field in (self._group, self._type, self._kind, self._name, self._version)
        )

    def __repr__(self) -> str:
        return f"Descriptor({str(self)!r})"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["Descriptor"]:
        """Parse a ``group:type:kind:name:version`` string."""
        if not value:
            return None

        tokens = value.split(":")
        if len(tokens) != 5:
            raise ConfigError(
                f"Descriptor {value} is in wrong format",
                "BAD_DESCRIPTOR"
            ).with_details("descriptor", value)

        return cls(*(token.strip() for token in tokens))
