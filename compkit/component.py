"""
Base class for components with logging and performance counters.
"""

from .config import ConfigParams, Configurable
from .count import CompositeCounters
from .log import CompositeLogger
from .refer import Referenceable, References


class Component(Configurable, Referenceable):
    """
    Base component that writes to whatever loggers and counters are registered.

    Example:
        class MyComponent(Component):
            def do_something(self, correlation_id):
                with self._counters.begin_timing("mycomponent.do_something"):
                    self._logger.info(correlation_id, "Doing something")
    """

    def __init__(self):
        self._logger = CompositeLogger()
        self._counters = CompositeCounters()

    def configure(self, config: ConfigParams) -> None:
        self._logger.configure(config)

    def set_references(self, references: References) -> None:
        self._logger.set_references(references)
        self._counters.set_references(references)
