"""
Component references registry.

References holds components together with their locators and lets
consumers find them by capability. Resolvers use it to locate discovery
services and credential stores; composite loggers and counters use it to
collect their targets. The registry is shared and externally managed:
consumers keep a reference to it but never own its contents.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from ..errors import InvalidArgumentError, ReferenceMissingError
from .descriptor import Descriptor


logger = logging.getLogger(__name__)


@dataclass
class Reference:
    """A component registered under a locator."""
    locator: Any
    component: Any

    def match(self, locator: Any) -> bool:
        """Check whether this reference is located by the given locator."""
        if self.locator == locator:
            return True
        if isinstance(self.locator, Descriptor):
            return self.locator.match(locator)
        return False


class References:
    """
    Ordered registry of components keyed by locators.

    Example:
        references = References.from_tuples(
            Descriptor("compkit", "discovery", "memory", "default", "1.0"), discovery
        )
        references.get_optional(Descriptor("*", "discovery", "*", "*", "*"))  # [discovery]
    """

    def __init__(self):
        self._references: List[Reference] = []

    def put(self, locator: Any, component: Any) -> None:
        """Register a component under a locator."""
        if component is None:
            raise InvalidArgumentError("Component cannot be null", "NO_COMPONENT")

        self._references.append(Reference(locator, component))
        logger.debug(f"Registered reference {locator}")

    def remove(self, locator: Any) -> Optional[Any]:
        """Remove the first component matching the locator and return it."""
        if locator is None:
            return None

        for index, reference in enumerate(self._references):
            if reference.match(locator):
                del self._references[index]
                return reference.component

        return None

    def remove_all(self, locator: Any) -> List[Any]:
        """Remove every component matching the locator and return them."""
        removed = [r.component for r in self._references if locator is not None and r.match(locator)]
        self._references = [r for r in self._references if locator is None or not r.match(locator)]
        return removed

    def get_all_locators(self) -> List[Any]:
        return [reference.locator for reference in self._references]

    def get_all(self) -> List[Any]:
        return [reference.component for reference in self._references]

    def clear(self) -> None:
        self._references = []

    def find(self, locator: Any, required: bool = False) -> List[Any]:
        """
        Find every component matching the locator, in registration order.

        Args:
            locator: Locator to match, usually a Descriptor with wildcards
            required: Raise ReferenceMissingError when nothing matches

        Returns:
            List of matching components
        """
        if locator is None:
            raise InvalidArgumentError("Locator cannot be null", "NO_LOCATOR")

        components = [r.component for r in self._references if r.match(locator)]

        if required and len(components) == 0:
            raise ReferenceMissingError(None, locator)

        return components

    def get_optional(self, locator: Any) -> List[Any]:
        return self.find(locator, False)

    def get_required(self, locator: Any) -> List[Any]:
        return self.find(locator, True)

    def get_one_optional(self, locator: Any) -> Optional[Any]:
        components = self.find(locator, False)
        return components[0] if components else None

    def get_one_required(self, locator: Any) -> Any:
        return self.find(locator, True)[0]

    @classmethod
    def from_tuples(cls, *tuples: Any) -> "References":
        """Create a registry from a flat locator, component, locator, component sequence."""
        result = cls()

        for index in range(0, len(tuples) - 1, 2):
            result.put(tuples[index], tuples[index + 1])

        return result


class Referenceable(ABC):
    """Component that receives references to its dependencies."""

    @abstractmethod
    def set_references(self, references: References) -> None:
        """Set references to dependent components."""
        pass
