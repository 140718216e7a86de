"""
FPS (Frames Per Second) meter built on a rate counter.
"""

from typing import Optional, Union

from ratecounter import CounterConfig, Strategy, build_counter
from ratecounter.clock import Clock, resolve_clock


class FPSMeter:
    """
    Measure and track frames per second.

    The current FPS comes from a rate counter of the chosen strategy, so
    switching between rolling and discrete counting needs no call-site change.
    """

    def __init__(
        self,
        window_size: int = 30,
        strategy: Union[Strategy, str] = Strategy.rolling,
        clock: Optional[Clock] = None
    ):
        """
        Initialize FPS meter.

        Args:
            window_size: Number of frames to average over
            strategy: 'rolling' or 'discrete'
            clock: Time source shared by the meter and its counter
        """
        self.config = CounterConfig(strategy=strategy, window_size=window_size)
        self.clock = resolve_clock(clock)
        self.counter = build_counter(self.config, clock=self.clock)
        self.frame_count = 0
        self.start_time = None

    @property
    def window_size(self) -> int:
        return self.counter.window_size

    def tick(self):
        """Record a frame."""
        if self.start_time is None:
            self.start_time = self.clock()

        self.counter.mark()
        self.frame_count += 1

    def get_fps(self) -> float:
        """
        Get current FPS.

        Returns:
            Current FPS based on recent frames
        """
        return self.counter.rate

    def get_average_fps(self) -> float:
        """
        Get average FPS since the first frame.

        Returns:
            Average FPS
        """
        if self.start_time is None or self.frame_count == 0:
            return 0.0

        elapsed = self.clock() - self.start_time
        if elapsed > 0:
            return self.frame_count / elapsed

        return 0.0

    def reset(self):
        """Reset the FPS meter."""
        self.counter = build_counter(self.config, clock=self.clock)
        self.frame_count = 0
        self.start_time = None

    def __str__(self) -> str:
        """String representation."""
        return f"FPS: {self.get_fps():.2f} (avg: {self.get_average_fps():.2f})"
