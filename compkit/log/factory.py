"""
Factory for logger components.
"""

from ..build import Factory
from ..refer import Descriptor
from .composite import CompositeLogger
from .console import ConsoleLogger
from .null import NullLogger


class DefaultLoggerFactory(Factory):
    """Creates NullLogger, ConsoleLogger and CompositeLogger components."""

    DESCRIPTOR = Descriptor("compkit", "factory", "logger", "default", "1.0")
    NULL_LOGGER_DESCRIPTOR = Descriptor("compkit", "logger", "null", "*", "1.0")
    CONSOLE_LOGGER_DESCRIPTOR = Descriptor("compkit", "logger", "console", "*", "1.0")
    COMPOSITE_LOGGER_DESCRIPTOR = Descriptor("compkit", "logger", "composite", "*", "1.0")

    def __init__(self):
        super().__init__()
        self.register_as_type(self.NULL_LOGGER_DESCRIPTOR, NullLogger)
        self.register_as_type(self.CONSOLE_LOGGER_DESCRIPTOR, ConsoleLogger)
        self.register_as_type(self.COMPOSITE_LOGGER_DESCRIPTOR, CompositeLogger)
