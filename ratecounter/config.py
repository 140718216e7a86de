"""
Counter configuration: pydantic schema plus YAML loading.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .base import RateCounter
from .clock import Clock
from .discrete import DiscreteRateCounter
from .rolling import Averaging, RollingRateCounter


class ConfigError(ValueError):
    """Raised when a counter configuration cannot be loaded or validated."""


class Strategy(str, Enum):
    """Supported counting strategies."""
    discrete = "discrete"
    rolling = "rolling"


class CounterConfig(BaseModel):
    """Settings needed to build a rate counter."""
    strategy: Strategy = Field(default=Strategy.rolling, description="Counting strategy")
    window_size: int = Field(default=10, ge=0, description="Cycles per window")
    averaging: Averaging = Field(
        default=Averaging.mean,
        description="History averaging mode (rolling strategy only)"
    )

    @model_validator(mode='after')
    def _check_rolling_window(self):
        if self.strategy == Strategy.rolling and self.window_size < 1:
            raise ValueError("rolling strategy needs a window_size of at least 1")
        return self


def load_config(path: Union[str, Path]) -> CounterConfig:
    """
    Load a counter configuration from YAML.

    The settings may sit at the top level of the document or under a
    ``counter:`` key.

    Args:
        path: Path to the YAML file

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the document is not a mapping or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if isinstance(data, dict) and 'counter' in data:
        data = data['counter']
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    try:
        return CounterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid counter config in {path}: {e}") from e


def build_counter(config: CounterConfig, clock: Optional[Clock] = None) -> RateCounter:
    """
    Create the counter described by a configuration.

    Args:
        config: Counter configuration
        clock: Optional time source passed to the counter

    Returns:
        A DiscreteRateCounter or RollingRateCounter
    """
    if config.strategy == Strategy.discrete:
        return DiscreteRateCounter(config.window_size, clock=clock)
    return RollingRateCounter(config.window_size, clock=clock, averaging=config.averaging)
