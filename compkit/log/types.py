"""
Logger interface, log levels and log messages.
"""

import traceback
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from ..config import ConfigParams, Reconfigurable, to_nullable_string
from ..refer import Descriptor, Referenceable, References


class LogLevel(IntEnum):
    """Log levels ordered by verbosity. A logger writes messages at or below its level."""
    NONE = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


_LEVEL_NAMES = {
    "0": LogLevel.NONE, "NOTHING": LogLevel.NONE, "NONE": LogLevel.NONE,
    "1": LogLevel.FATAL, "FATAL": LogLevel.FATAL,
    "2": LogLevel.ERROR, "ERROR": LogLevel.ERROR,
    "3": LogLevel.WARN, "WARN": LogLevel.WARN, "WARNING": LogLevel.WARN,
    "4": LogLevel.INFO, "INFO": LogLevel.INFO,
    "5": LogLevel.DEBUG, "DEBUG": LogLevel.DEBUG,
    "6": LogLevel.TRACE, "TRACE": LogLevel.TRACE,
}


def to_log_level(value: Any, default: LogLevel = LogLevel.INFO) -> LogLevel:
    """Convert a level name or number into a LogLevel."""
    if value is None:
        return LogLevel.INFO
    if isinstance(value, LogLevel):
        return value

    name = to_nullable_string(value).strip().upper()
    return _LEVEL_NAMES.get(name, default)


def level_to_string(level: LogLevel) -> str:
    if level == LogLevel.NONE:
        return "UNDEF"
    return LogLevel(level).name


@dataclass
class LogMessage:
    """A log record kept by cached loggers until it is saved."""
    time: datetime
    source: Optional[str]
    level: str
    correlation_id: Optional[str]
    error: Optional[str]
    message: str


class Logger(Reconfigurable, Referenceable):
    """
    Abstract base class for component loggers.

    Messages are formatted with ``%`` style arguments and handed to ``_write``.

    Configuration parameters:
        level: Maximum level to write (default INFO)
        source: Source name attached to messages

    References:
        *:context-info:*:*:1.0 Context info used as the default source
    """

    CONTEXT_INFO_DESCRIPTOR = Descriptor("*", "context-info", "*", "*", "1.0")

    def __init__(self):
        self._level = LogLevel.INFO
        self._source: Optional[str] = None

    def configure(self, config: ConfigParams) -> None:
        self._level = to_log_level(config.get_as_nullable_string("level"), self._level)
        self._source = config.get_as_string_with_default("source", self._source)

    def set_references(self, references: References) -> None:
        context_info = references.get_one_optional(self.CONTEXT_INFO_DESCRIPTOR)
        if context_info is not None and self._source is None:
            self._source = context_info.name

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        self._level = value

    @property
    def source(self) -> Optional[str]:
        return self._source

    @source.setter
    def source(self, value: Optional[str]) -> None:
        self._source = value

    @abstractmethod
    def _write(self, level: LogLevel, correlation_id: Optional[str],
               error: Optional[BaseException], message: str) -> None:
        pass

    def _format_and_write(self, level: LogLevel, correlation_id: Optional[str],
                          error: Optional[BaseException], message: Optional[str], *args: Any) -> None:
        message = message if message is not None else ""
        if args:
            message = message % args

        self._write(level, correlation_id, error, message)

    def log(self, level: LogLevel, correlation_id: Optional[str],
            error: Optional[BaseException], message: Optional[str], *args: Any) -> None:
        self._format_and_write(level, correlation_id, error, message, *args)

    def fatal(self, correlation_id: Optional[str], error: Optional[BaseException],
              message: Optional[str], *args: Any) -> None:
        self._format_and_write(LogLevel.FATAL, correlation_id, error, message, *args)

    def error(self, correlation_id: Optional[str], error: Optional[BaseException],
              message: Optional[str], *args: Any) -> None:
        self._format_and_write(LogLevel.ERROR, correlation_id, error, message, *args)

    def warn(self, correlation_id: Optional[str], message: Optional[str], *args: Any) -> None:
        self._format_and_write(LogLevel.WARN, correlation_id, None, message, *args)

    def info(self, correlation_id: Optional[str], message: Optional[str], *args: Any) -> None:
        self._format_and_write(LogLevel.INFO, correlation_id, None, message, *args)

    def debug(self, correlation_id: Optional[str], message: Optional[str], *args: Any) -> None:
        self._format_and_write(LogLevel.DEBUG, correlation_id, None, message, *args)

    def trace(self, correlation_id: Optional[str], message: Optional[str], *args: Any) -> None:
        self._format_and_write(LogLevel.TRACE, correlation_id, None, message, *args)

    def _compose_error(self, error: BaseException) -> str:
        result = str(error)

        cause = getattr(error, "cause", None) or error.__cause__
        if cause is not None:
            result += f" Caused by: {cause}"

        if error.__traceback__ is not None:
            stack = "".join(traceback.format_tb(error.__traceback__))
            result += f" Stack trace: {stack}"

        return result
