"""
Discrete (windowed-batch) rate counter.
Counts N cycles, derives a rate from the time they took, then starts over.
"""

import logging
from typing import Optional

from .base import safe_divide, validate_window_size
from .clock import Clock, resolve_clock
from .format import format_debug, format_rate

logger = logging.getLogger(__name__)


class DiscreteRateCounter:
    """
    Non-rolling rate counter, suited to fast-changing rates such as game FPS.

    The rate is recalculated once every ``window_size`` calls to ``mark()``,
    so it takes at least that many cycles to react to a change. Until the
    first window completes, ``rate`` is 0.0.

    A window size of 0 means "recalculate on every mark".
    """

    def __init__(self, window_size: int, clock: Optional[Clock] = None):
        """
        Initialize the counter.

        Args:
            window_size: Cycles between recalculations (0 recalculates every mark)
            clock: Time source returning seconds; defaults to time.perf_counter
        """
        self._window_size = validate_window_size(window_size, 0, type(self).__name__)
        self._clock = resolve_clock(clock)

        self._cycles = 0
        self._anchor = self._clock()
        self._rate = 0.0

    @property
    def rate(self) -> float:
        """Last calculated rate in Hz."""
        return self._rate

    @property
    def window_size(self) -> int:
        return self._window_size

    @window_size.setter
    def window_size(self, window_size: int):
        self.set_window_size(window_size)

    def set_window_size(self, window_size: int):
        """
        Set the number of cycles between recalculations.

        Takes effect at the next mark; the current count is kept.
        """
        self._window_size = validate_window_size(window_size, 0, type(self).__name__)

    @property
    def cycles_since_recompute(self) -> int:
        """Number of cycles since the rate was last recalculated."""
        return self._cycles

    def seconds_since_recompute(self) -> float:
        """
        Time since the rate was last recalculated.
        Reads the clock, so it is more expensive than the other accessors.

        Returns:
            Elapsed time in seconds
        """
        return self._clock() - self._anchor

    def mark(self):
        """Record one cycle. Call at the beginning of each cycle."""
        self._cycles += 1

        if self._cycles >= self._window_size:
            elapsed = self._clock() - self._anchor
            self._rate = safe_divide(self._cycles, elapsed)

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Recomputed rate %.3f Hz over %d cycles in %.6fs",
                    self._rate, self._cycles, elapsed
                )

            # Start the next window
            self._anchor = self._clock()
            self._cycles = 0

    def marked(self) -> 'DiscreteRateCounter':
        """
        Return an updated copy, leaving this counter as it was.

        Returns:
            New counter that has seen one more cycle
        """
        new = self.copy()
        new.mark()
        return new

    def copy(self) -> 'DiscreteRateCounter':
        """Return an independent copy sharing the same clock."""
        new = type(self).__new__(type(self))
        new.__dict__.update(self.__dict__)
        return new

    def __str__(self) -> str:
        return format_rate(self)

    def __repr__(self) -> str:
        return format_debug(self)
