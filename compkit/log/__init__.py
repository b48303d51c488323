"""
Package log provides component loggers.

Component loggers are configured and wired through references like any
other component, unlike module-level ``logging`` loggers which compkit uses
for its own diagnostics.

This package implements:
- Log levels and log messages
- Logger base class with level filtering and message formatting
- Null, console, composite and cached loggers
- Logger factory
"""

from .types import (
    LogLevel,
    LogMessage,
    Logger,
    to_log_level,
    level_to_string
)

from .null import NullLogger

from .console import ConsoleLogger

from .composite import CompositeLogger

from .cached import CachedLogger

from .factory import DefaultLoggerFactory

__all__ = [
    # Types
    'LogLevel',
    'LogMessage',
    'Logger',
    'to_log_level',
    'level_to_string',

    # Implementations
    'NullLogger',
    'ConsoleLogger',
    'CompositeLogger',
    'CachedLogger',

    # Factory
    'DefaultLoggerFactory',
]
