"""Init file for monitoring package."""

from .fps_meter import FPSMeter
from .benchmarks import BenchmarkRunner

__all__ = [
    'FPSMeter',
    'BenchmarkRunner'
]
