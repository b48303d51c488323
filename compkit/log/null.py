"""
Logger that discards all messages.
"""

from typing import Optional

from .types import Logger, LogLevel


class NullLogger(Logger):
    """Dummy logger used when logging is not needed."""

    def _write(self, level: LogLevel, correlation_id: Optional[str],
               error: Optional[BaseException], message: str) -> None:
        pass
