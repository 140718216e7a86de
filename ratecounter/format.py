"""
Text rendering for rate counters.
Only reads the public ``rate`` and ``window_size`` of a counter.
"""


def format_rate(counter) -> str:
    """Render a counter as ``"<rate> Hz"``."""
    return f"{counter.rate} Hz"


def format_debug(counter) -> str:
    """Render a counter as ``"{ samples: <window_size>, rate: <rate> }"``."""
    return f"{{ samples: {counter.window_size}, rate: {counter.rate} }}"
