"""
Factories for creating components by locator.
Provides a centralized way to register and create component implementations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Type

from ..errors import CreateError, InvalidArgumentError
from ..refer import Descriptor


logger = logging.getLogger(__name__)


def _locators_match(registered: Any, locator: Any) -> bool:
    if registered == locator:
        return True
    if isinstance(registered, Descriptor):
        return registered.match(locator)
    return False


class ComponentFactory(ABC):
    """Abstract base class for component factories."""

    @abstractmethod
    def can_create(self, locator: Any) -> Optional[Any]:
        """
        Check if this factory can create a component for the locator.

        Returns:
            The registered locator that matched, or None
        """
        pass

    @abstractmethod
    def create(self, locator: Any) -> Optional[Any]:
        """Create a component identified by the locator."""
        pass


@dataclass
class Registration:
    """A factory callable registered under a locator."""
    locator: Any
    factory: Callable[[Any], Any]


class Factory(ComponentFactory):
    """
    Factory with an ordered list of locator / constructor registrations.

    Example:
        factory = Factory()
        factory.register_as_type(Descriptor("compkit", "cache", "memory", "*", "1.0"), MemoryCache)
        cache = factory.create(Descriptor("compkit", "cache", "memory", "default", "1.0"))
    """

    def __init__(self):
        self._registrations: List[Registration] = []

    def register(self, locator: Any, factory: Callable[[Any], Any]) -> None:
        """
        Register a factory callable for a locator.

        Args:
            locator: Locator identifying the component to create
            factory: Callable receiving the requested locator and returning a component
        """
        if locator is None:
            raise InvalidArgumentError("Locator cannot be null", "NO_LOCATOR")
        if factory is None:
            raise InvalidArgumentError("Factory cannot be null", "NO_FACTORY")

        self._registrations.append(Registration(locator, factory))

    def register_as_type(self, locator: Any, component_type: Type) -> None:
        """Register a class whose no-argument constructor creates the component."""
        if locator is None:
            raise InvalidArgumentError("Locator cannot be null", "NO_LOCATOR")
        if component_type is None:
            raise InvalidArgumentError("Factory cannot be null", "NO_FACTORY")

        self._registrations.append(Registration(locator, lambda _: component_type()))

    def can_create(self, locator: Any) -> Optional[Any]:
        for registration in self._registrations:
            if _locators_match(registration.locator, locator):
                return registration.locator
        return None

    def create(self, locator: Any) -> Optional[Any]:
        for registration in self._registrations:
            if _locators_match(registration.locator, locator):
                try:
                    return registration.factory(locator)
                except CreateError:
                    raise
                except Exception as e:
                    raise CreateError(
                        None, f"Failed to create object for {locator}"
                    ).with_details("locator", locator).with_cause(e)
        return None


class CompositeFactory(ComponentFactory):
    """
    Aggregates multiple factories. The most recently added factory wins
    when several can create the same locator.
    """

    def __init__(self, *factories: ComponentFactory):
        self._factories: List[ComponentFactory] = list(factories)

    def add(self, factory: ComponentFactory) -> None:
        if factory is None:
            raise InvalidArgumentError("Factory cannot be null", "NO_FACTORY")
        self._factories.append(factory)

    def remove(self, factory: ComponentFactory) -> None:
        self._factories = [f for f in self._factories if f is not factory]

    def can_create(self, locator: Any) -> Optional[Any]:
        if locator is None:
            raise InvalidArgumentError("Locator cannot be null", "NO_LOCATOR")

        for factory in reversed(self._factories):
            this_locator = factory.can_create(locator)
            if this_locator is not None:
                return this_locator

        return None

    def create(self, locator: Any) -> Any:
        if locator is None:
            raise InvalidArgumentError("Locator cannot be null", "NO_LOCATOR")

        for factory in reversed(self._factories):
            if factory.can_create(locator) is not None:
                logger.debug(f"Creating component for {locator}")
                return factory.create(locator)

        raise CreateError(None, locator)
