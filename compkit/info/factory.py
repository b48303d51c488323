"""
Factory for context information components.
"""

from ..build import Factory
from ..refer import Descriptor
from .context import ContextInfo


class DefaultInfoFactory(Factory):
    """Creates ContextInfo components for context and container descriptors."""

    DESCRIPTOR = Descriptor("compkit", "factory", "info", "default", "1.0")
    CONTEXT_INFO_DESCRIPTOR = Descriptor("compkit", "context-info", "default", "*", "1.0")
    CONTAINER_INFO_DESCRIPTOR = Descriptor("compkit", "container-info", "default", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.CONTEXT_INFO_DESCRIPTOR, ContextInfo)
        self.register_as_type(self.CONTAINER_INFO_DESCRIPTOR, ContextInfo)
