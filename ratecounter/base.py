"""
Shared contract for rate counters.
Both counters implement the same operations so callers can swap strategies
without touching call sites.
"""

import numbers
from typing import Protocol, TypeVar, runtime_checkable


T = TypeVar('T', bound='RateCounter')


class InvalidWindowSize(ValueError):
    """Raised when a counter is given a window size it cannot work with."""

    def __init__(self, window_size, minimum: int, counter: str):
        self.window_size = window_size
        self.minimum = minimum
        super().__init__(
            f"{counter} window size must be >= {minimum}, got {window_size}"
        )


@runtime_checkable
class RateCounter(Protocol):
    """
    Anything that can be marked once per cycle and report a rate in Hz.
    """

    @property
    def rate(self) -> float:
        """Last calculated rate, in Hertz (cycles per second)."""
        ...

    @property
    def window_size(self) -> int:
        """Number of cycles the counter considers."""
        ...

    def set_window_size(self, window_size: int) -> None:
        """Change the number of cycles the counter considers."""
        ...

    def mark(self) -> None:
        """Record one cycle. Call at the start of every cycle."""
        ...

    def marked(self: T) -> T:
        """Return a marked copy, leaving this counter untouched."""
        ...


def validate_window_size(window_size, minimum: int, counter: str) -> int:
    """
    Check a window size before it is stored.

    Args:
        window_size: Requested window size
        minimum: Smallest accepted value
        counter: Counter name used in the error message

    Returns:
        The window size as a plain int

    Raises:
        TypeError: If the value is not an integer
        InvalidWindowSize: If the value is below ``minimum``
    """
    # bool is an Integral but never a meaningful window size
    if isinstance(window_size, bool) or not isinstance(window_size, numbers.Integral):
        raise TypeError(
            f"{counter} window size must be an integer, got {type(window_size).__name__}"
        )

    window_size = int(window_size)
    if window_size < minimum:
        raise InvalidWindowSize(window_size, minimum, counter)

    return window_size


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning inf for a zero denominator instead of raising."""
    if denominator == 0.0:
        return float('inf') if numerator > 0 else 0.0
    return numerator / denominator
