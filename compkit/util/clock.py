"""
Time helpers shared by expiring components.
"""

import time


def current_time_millis() -> int:
    """Get current timestamp in milliseconds since epoch."""
    return int(time.time() * 1000)
