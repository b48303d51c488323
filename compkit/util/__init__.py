"""
Utility functions for compkit components.
"""

from .clock import current_time_millis

__all__ = [
    'current_time_millis',
]
