"""
Logger that writes to the process console.
"""

import sys
from datetime import datetime
from typing import Optional

from .types import Logger, LogLevel, level_to_string


class ConsoleLogger(Logger):
    """
    Writes messages as ``[correlation_id:LEVEL:time] message`` lines.

    WARN, ERROR and FATAL go to stderr, everything else to stdout.
    """

    def _write(self, level: LogLevel, correlation_id: Optional[str],
               error: Optional[BaseException], message: str) -> None:
        if self._level < level:
            return

        correlation = correlation_id if correlation_id is not None else "---"
        result = f"[{correlation}:{level_to_string(level)}:{datetime.now().isoformat()}] {message}"

        if error is not None:
            result += "Error: " if len(message) == 0 else ": "
            result += self._compose_error(error)

        if level in (LogLevel.FATAL, LogLevel.ERROR, LogLevel.WARN):
            print(result, file=sys.stderr)
        else:
            print(result, file=sys.stdout)
