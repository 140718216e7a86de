"""
Rolling (sliding-window) rate counter.
Keeps the last N cycle timestamps and recalculates the rate on every mark.
"""

import logging
from collections import deque
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from .base import safe_divide, validate_window_size
from .clock import Clock, resolve_clock
from .format import format_debug, format_rate

logger = logging.getLogger(__name__)


class Averaging(str, Enum):
    """How a rolling counter turns its timestamp history into a rate."""
    mean = "mean"
    midpoint = "midpoint"


class RollingRateCounter:
    """
    Rolling rate counter.

    Records up to ``window_size`` timestamps and recalculates the rate on
    each call to ``mark()``. Reacts immediately to new samples, but costs
    O(window_size) per mark, so very large windows are best avoided when the
    rate is not needed every cycle.

    Averaging modes:
        mean: ``1 / mean(intervals)`` over the window (default)
        midpoint: the legacy fold ``rate = window_size / ((rate + dt) / 2)``
            applied to each interval in order, starting from 0.0
    """

    def __init__(
        self,
        window_size: int,
        clock: Optional[Clock] = None,
        averaging: Union[Averaging, str] = Averaging.mean
    ):
        """
        Initialize the counter.

        Args:
            window_size: Number of timestamps to keep (must be >= 1)
            clock: Time source returning seconds; defaults to time.perf_counter
            averaging: Averaging mode, see class docstring

        Raises:
            InvalidWindowSize: If window_size is 0
        """
        self._window_size = validate_window_size(window_size, 1, type(self).__name__)
        self._clock = resolve_clock(clock)
        self._averaging = Averaging(averaging)

        self._history: deque = deque()
        self._rate = 0.0

    @property
    def rate(self) -> float:
        """Last calculated rate in Hz."""
        return self._rate

    @property
    def averaging(self) -> Averaging:
        return self._averaging

    @property
    def history(self) -> Tuple[float, ...]:
        """Snapshot of recorded timestamps, oldest first."""
        return tuple(self._history)

    @property
    def window_size(self) -> int:
        return self._window_size

    @window_size.setter
    def window_size(self, window_size: int):
        self.set_window_size(window_size)

    def set_window_size(self, window_size: int):
        """
        Set the number of timestamps kept.
        Shrinking the window drops the oldest timestamps right away.

        Raises:
            InvalidWindowSize: If window_size is 0
        """
        self._window_size = validate_window_size(window_size, 1, type(self).__name__)

        evicted = 0
        while len(self._history) > self._window_size:
            self._history.popleft()
            evicted += 1

        if evicted:
            logger.debug("Window shrunk to %d, evicted %d timestamps", self._window_size, evicted)

    def mark(self):
        """Record one cycle. Call at the beginning of each cycle."""
        # Make room for the new timestamp
        while len(self._history) >= self._window_size:
            self._history.popleft()

        self._history.append(self._clock())
        self._rate = self._compute_rate()

    def _compute_rate(self) -> float:
        if len(self._history) < 2:
            return 0.0

        intervals = np.diff(np.fromiter(self._history, dtype=np.float64, count=len(self._history)))

        if self._averaging is Averaging.midpoint:
            rate = 0.0
            for delta_t in intervals:
                avg_delta_t = (rate + float(delta_t)) / 2.0
                rate = safe_divide(float(self._window_size), avg_delta_t)
            return rate

        return safe_divide(1.0, float(np.mean(intervals)))

    def marked(self) -> 'RollingRateCounter':
        """
        Return an updated copy, leaving this counter as it was.

        Returns:
            New counter that has seen one more cycle
        """
        new = self.copy()
        new.mark()
        return new

    def copy(self) -> 'RollingRateCounter':
        """Return an independent copy sharing the same clock."""
        new = type(self).__new__(type(self))
        new.__dict__.update(self.__dict__)
        new._history = deque(self._history)
        return new

    def __str__(self) -> str:
        return format_rate(self)

    def __repr__(self) -> str:
        return format_debug(self)
