"""
Tests for performance counters.
"""

import time
from datetime import datetime
from typing import List
from unittest.mock import MagicMock

import pytest

from compkit.config import ConfigParams
from compkit.count import (
    CachedCounters, CompositeCounters, Counter, CounterType, DefaultCountersFactory,
    LogCounters, NullCounters, Timing
)
from compkit.errors import InvalidArgumentError
from compkit.log import CachedLogger, LogMessage
from compkit.refer import Descriptor, References


class RecordingCounters(CachedCounters):
    """Cached counters that keep saved counters for inspection."""

    def __init__(self):
        super().__init__()
        self.saved: List[Counter] = []

    def _save(self, counters: List[Counter]) -> None:
        self.saved = list(counters)


class RecordingLogger(CachedLogger):
    """Cached logger that keeps saved messages for inspection."""

    def __init__(self):
        super().__init__()
        self.saved: List[LogMessage] = []

    def _save(self, messages: List[LogMessage]) -> None:
        self.saved.extend(messages)


class TestCachedCounters:
    """Test counter aggregation."""

    def test_statistics(self):
        """Test running min, max and average."""
        counters = RecordingCounters()

        counters.stats("stats", 1)
        counters.stats("stats", 4)
        counters.stats("stats", 1)

        counter = counters.get("stats", CounterType.STATISTICS)
        assert counter.count == 3
        assert counter.min == 1
        assert counter.max == 4
        assert counter.average == 2
        assert counter.last == 1

    def test_increment_and_last(self):
        """Test increment and last value counters."""
        counters = RecordingCounters()

        counters.increment_one("calls")
        counters.increment("calls", 4)
        counters.last("queue", 7)

        assert counters.get("calls", CounterType.INCREMENT).count == 5
        assert counters.get("queue", CounterType.LAST_VALUE).last == 7

    def test_timestamp(self):
        """Test timestamp counters."""
        counters = RecordingCounters()
        moment = datetime(2024, 1, 1)

        counters.timestamp("event", moment)
        assert counters.get("event", CounterType.TIMESTAMP).time == moment

        counters.timestamp_now("now")
        assert counters.get("now", CounterType.TIMESTAMP).time is not None

    def test_timing(self):
        """Test measuring elapsed time with a context manager."""
        counters = RecordingCounters()

        with counters.begin_timing("exec_time"):
            time.sleep(0.02)

        counter = counters.get("exec_time", CounterType.INTERVAL)
        assert counter.count == 1
        assert counter.last >= 10

    def test_type_change_replaces_counter(self):
        """Test that asking for another type replaces the counter."""
        counters = RecordingCounters()

        counters.increment("value", 3)
        counter = counters.get("value", CounterType.LAST_VALUE)

        assert counter.type == CounterType.LAST_VALUE
        assert counter.count is None

    def test_empty_name(self):
        """Test that a counter requires a name."""
        counters = RecordingCounters()

        with pytest.raises(InvalidArgumentError):
            counters.get("", CounterType.INCREMENT)

    def test_dump(self):
        """Test that dump saves counters only after updates."""
        counters = RecordingCounters()

        counters.dump()
        assert counters.saved == []

        counters.increment_one("calls")
        counters.dump()

        assert [c.name for c in counters.saved] == ["calls"]

    def test_dump_on_interval(self):
        """Test that updates dump once the interval has passed."""
        counters = RecordingCounters()
        counters.configure(ConfigParams.from_tuples("interval", 10))

        assert counters.interval == 10

        time.sleep(0.05)
        counters.increment_one("calls")

        assert [c.name for c in counters.saved] == ["calls"]

    def test_reset_timeout(self):
        """Test that counters are dropped after the reset timeout."""
        counters = RecordingCounters()
        counters.reset_timeout = 10

        counters.increment_one("calls")
        time.sleep(0.05)

        assert counters.get_all() == []

    def test_clear(self):
        """Test clearing single and all counters."""
        counters = RecordingCounters()
        counters.increment_one("a")
        counters.increment_one("b")

        counters.clear("a")
        assert [c.name for c in counters.get_all()] == ["b"]

        counters.clear_all()
        assert counters.get_all() == []


class TestLogCounters:
    """Test writing counters to loggers."""

    def test_dump_to_logger(self):
        """Test that counters are written sorted by name."""
        logger = RecordingLogger()
        counters = LogCounters()
        counters.set_references(References.from_tuples(
            Descriptor("compkit", "logger", "test", "default", "1.0"), logger
        ))

        counters.increment_one("b.calls")
        counters.stats("a.stats", 5)
        counters.dump()
        logger.dump()

        messages = [m.message for m in logger.saved]
        assert messages[0].startswith('Counter a.stats { "type": 2')
        assert '"avg": 5' in messages[0]
        assert messages[1].startswith('Counter b.calls { "type": 4, "count": 1')


class TestCompositeCounters:
    """Test forwarding to referenced counters."""

    def test_forwards_to_all_counters(self):
        """Test that values reach every referenced counters component."""
        first = RecordingCounters()
        second = MagicMock()

        composite = CompositeCounters()
        composite.set_references(References.from_tuples(
            Descriptor("compkit", "counters", "test", "first", "1.0"), first,
            Descriptor("compkit", "counters", "test", "second", "1.0"), second,
            Descriptor("compkit", "counters", "composite", "default", "1.0"), composite
        ))

        composite.increment_one("calls")
        with composite.begin_timing("exec_time"):
            pass

        assert first.get("calls", CounterType.INCREMENT).count == 1
        assert first.get("exec_time", CounterType.INTERVAL).count == 1
        second.increment.assert_called_once_with("calls", 1)
        second.end_timing.assert_called_once()


class TestNullCounters:
    """Test the null counters and factory."""

    def test_null_counters(self):
        """Test that null counters accept every call."""
        counters = NullCounters()

        with counters.begin_timing("exec_time") as timing:
            assert isinstance(timing, Timing)
        counters.increment_one("calls")
        counters.stats("stats", 1)

    def test_factory(self):
        """Test creating counters by descriptor."""
        factory = DefaultCountersFactory()

        assert isinstance(factory.create(factory.LOG_COUNTERS_DESCRIPTOR), LogCounters)
        assert isinstance(factory.create(factory.NULL_COUNTERS_DESCRIPTOR), NullCounters)
        assert isinstance(factory.create(factory.COMPOSITE_COUNTERS_DESCRIPTOR), CompositeCounters)
