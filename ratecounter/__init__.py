"""Rate counters for periodic activities (frames, ticks, polls), in Hz."""

from .base import RateCounter, InvalidWindowSize
from .clock import ManualClock
from .discrete import DiscreteRateCounter
from .rolling import RollingRateCounter, Averaging
from .config import CounterConfig, ConfigError, Strategy, load_config, build_counter
from .format import format_rate, format_debug

__all__ = [
    'RateCounter',
    'InvalidWindowSize',
    'ManualClock',
    'DiscreteRateCounter',
    'RollingRateCounter',
    'Averaging',
    'CounterConfig',
    'ConfigError',
    'Strategy',
    'load_config',
    'build_counter',
    'format_rate',
    'format_debug'
]

__version__ = "0.1.0"
