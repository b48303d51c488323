"""
Logger that forwards messages to every logger in references.
"""

from typing import List, Optional

from ..refer import Descriptor, References
from .types import Logger, LogLevel


class CompositeLogger(Logger):
    """
    Aggregates all loggers found in references into one.

    Components hold a CompositeLogger and write to it; the actual outputs
    are decided by whatever loggers are registered.

    References:
        *:logger:*:*:* Loggers to forward messages to
    """

    LOGGER_DESCRIPTOR = Descriptor("*", "logger", "*", "*", "*")

    def __init__(self, references: Optional[References] = None):
        super().__init__()
        self._loggers: List[Logger] = []

        if references is not None:
            self.set_references(references)

    def set_references(self, references: References) -> None:
        super().set_references(references)

        for logger in references.get_optional(self.LOGGER_DESCRIPTOR):
            if logger is not self:
                self._loggers.append(logger)

    def _write(self, level: LogLevel, correlation_id: Optional[str],
               error: Optional[BaseException], message: str) -> None:
        for logger in self._loggers:
            logger.log(level, correlation_id, error, message)
