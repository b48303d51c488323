"""
Package build provides factories that create components by locator.
"""

from .factory import (
    ComponentFactory,
    Registration,
    Factory,
    CompositeFactory
)

from ..errors import CreateError

__all__ = [
    'ComponentFactory',
    'Registration',
    'Factory',
    'CompositeFactory',
    'CreateError',
]
