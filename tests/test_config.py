"""
Unit tests for counter configuration and YAML loading.
"""

import pytest
import yaml
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pydantic import ValidationError

from ratecounter import (
    Averaging,
    ConfigError,
    CounterConfig,
    DiscreteRateCounter,
    ManualClock,
    RollingRateCounter,
    Strategy,
    build_counter,
    load_config,
)


def write_yaml(path: Path, data) -> Path:
    with open(path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    return path


class TestCounterConfig:
    """Tests for the pydantic schema."""

    def test_defaults(self):
        """Test default settings."""
        config = CounterConfig()

        assert config.strategy == Strategy.rolling
        assert config.window_size == 10
        assert config.averaging == Averaging.mean

    def test_rolling_rejects_zero_window(self):
        """Test rolling counters need at least one sample."""
        with pytest.raises(ValidationError):
            CounterConfig(strategy="rolling", window_size=0)

    def test_discrete_accepts_zero_window(self):
        """Test discrete counters may recompute every mark."""
        config = CounterConfig(strategy="discrete", window_size=0)
        assert config.window_size == 0

    def test_negative_window_rejected(self):
        """Test negative windows fail for any strategy."""
        with pytest.raises(ValidationError):
            CounterConfig(strategy="discrete", window_size=-1)


class TestLoadConfig:
    """Tests for load_config."""

    def test_top_level_mapping(self, tmp_path):
        """Test settings at the document root."""
        path = write_yaml(tmp_path / "counter.yaml", {
            'strategy': 'discrete',
            'window_size': 25,
        })

        config = load_config(path)

        assert config.strategy == Strategy.discrete
        assert config.window_size == 25

    def test_nested_counter_key(self, tmp_path):
        """Test settings under a counter: key."""
        path = write_yaml(tmp_path / "app.yaml", {
            'counter': {'window_size': 4, 'averaging': 'midpoint'},
        })

        config = load_config(str(path))

        assert config.strategy == Strategy.rolling
        assert config.averaging == Averaging.midpoint

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test an empty document falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == CounterConfig()

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        """Test a list document is rejected."""
        path = write_yaml(tmp_path / "list.yaml", [1, 2, 3])

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        """Test validation errors are wrapped in ConfigError."""
        path = write_yaml(tmp_path / "bad.yaml", {'strategy': 'rolling', 'window_size': 0})

        with pytest.raises(ConfigError) as excinfo:
            load_config(path)
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_unknown_strategy(self, tmp_path):
        """Test unknown strategies are rejected."""
        path = write_yaml(tmp_path / "bad.yaml", {'strategy': 'ema'})

        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        """Test unparsable YAML raises ConfigError."""
        path = tmp_path / "broken.yaml"
        path.write_text("strategy: [rolling\n")

        with pytest.raises(ConfigError):
            load_config(path)


class TestBuildCounter:
    """Tests for build_counter."""

    def test_builds_discrete(self):
        """Test the discrete strategy."""
        counter = build_counter(CounterConfig(strategy="discrete", window_size=3))

        assert isinstance(counter, DiscreteRateCounter)
        assert counter.window_size == 3

    def test_builds_rolling_with_clock(self):
        """Test the rolling strategy uses the given clock and averaging."""
        clock = ManualClock(start=5.0)
        counter = build_counter(
            CounterConfig(window_size=2, averaging="midpoint"),
            clock=clock
        )
        counter.mark()

        assert isinstance(counter, RollingRateCounter)
        assert counter.averaging == Averaging.midpoint
        assert counter.history == (5.0,)
