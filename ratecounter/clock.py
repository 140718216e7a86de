"""
Time sources for rate counters.

A clock is any zero-argument callable returning seconds as a float from a
monotonic origin. Counters default to ``time.perf_counter``.
"""

import time
from typing import Callable, Optional


Clock = Callable[[], float]

default_clock: Clock = time.perf_counter


def resolve_clock(clock: Optional[Clock]) -> Clock:
    """Return ``clock`` or the default monotonic clock."""
    return default_clock if clock is None else clock


class ManualClock:
    """
    Deterministic clock advanced by hand.

    Useful for driving counters from recorded timestamps or in tests,
    without sleeping.
    """

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        """
        Move the clock forward.

        Args:
            seconds: Non-negative amount of time to add

        Returns:
            The new clock value
        """
        if seconds < 0:
            raise ValueError(f"Clock cannot go backwards (advance by {seconds})")
        self.now += seconds
        return self.now

    def set(self, value: float) -> None:
        """Jump to an absolute time, which must not be in the past."""
        if value < self.now:
            raise ValueError(f"Clock cannot go backwards ({value} < {self.now})")
        self.now = float(value)

    def __repr__(self) -> str:
        return f"ManualClock(now={self.now})"
