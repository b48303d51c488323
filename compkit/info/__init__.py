"""
Package info provides information about the running context.
"""

from .context import ContextInfo

from .factory import DefaultInfoFactory

__all__ = [
    'ContextInfo',
    'DefaultInfoFactory',
]
