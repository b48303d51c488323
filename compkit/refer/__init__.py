"""
Package refer provides component locators and the references registry.
"""

from .descriptor import Descriptor

from .references import (
    Reference,
    References,
    Referenceable
)

__all__ = [
    'Descriptor',
    'Reference',
    'References',
    'Referenceable',
]
