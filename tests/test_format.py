"""
Unit tests for counter rendering and the manual clock.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ratecounter import (
    DiscreteRateCounter,
    ManualClock,
    RollingRateCounter,
    format_debug,
    format_rate,
)


@pytest.fixture(params=[DiscreteRateCounter, RollingRateCounter])
def counter_cls(request):
    """Both counter types."""
    return request.param


class TestFormatting:
    """Tests for Display/Debug style output."""

    def test_fresh_counter(self, counter_cls):
        """Test rendering before any data."""
        counter = counter_cls(10, clock=ManualClock())

        assert str(counter) == "0.0 Hz"
        assert repr(counter) == "{ samples: 10, rate: 0.0 }"

    def test_after_marks(self, counter_cls):
        """Test rendering reflects the public rate and window size."""
        clock = ManualClock()
        counter = counter_cls(4, clock=clock)
        for _ in range(4):
            clock.advance(0.01)
            counter.mark()

        rate = counter.rate
        assert rate > 0.0
        assert str(counter) == f"{rate} Hz"
        assert repr(counter) == f"{{ samples: 4, rate: {rate} }}"
        assert format_rate(counter) == str(counter)
        assert format_debug(counter) == repr(counter)

    def test_format_helpers_only_need_public_fields(self):
        """Test the helpers work on any object exposing rate and window_size."""
        class Stub:
            rate = 12.5
            window_size = 3

        assert format_rate(Stub()) == "12.5 Hz"
        assert format_debug(Stub()) == "{ samples: 3, rate: 12.5 }"


class TestManualClock:
    """Tests for ManualClock."""

    def test_advance_and_set(self):
        """Test the clock moves only when told to."""
        clock = ManualClock(start=1.0)
        assert clock() == 1.0

        assert clock.advance(0.5) == 1.5
        clock.set(3.0)
        assert clock() == 3.0

    def test_cannot_go_backwards(self):
        """Test a monotonic clock refuses to rewind."""
        clock = ManualClock(start=2.0)

        with pytest.raises(ValueError):
            clock.advance(-0.1)
        with pytest.raises(ValueError):
            clock.set(1.0)
        assert clock() == 2.0
