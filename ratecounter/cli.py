"""
Command-line driver: mark a counter on a fixed period and print its rate.

Usage:
    # Rolling counter, one mark per second, forever
    python -m ratecounter

    # Discrete counter over 5 cycles, 20 marks at 10 ms
    python -m ratecounter --strategy discrete --window-size 5 --period 0.01 --count 20

    # Settings from YAML
    python -m ratecounter --config counter.yaml
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .base import InvalidWindowSize
from .config import ConfigError, CounterConfig, Strategy, build_counter, load_config
from .rolling import Averaging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mark a rate counter periodically and print the measured rate"
    )
    parser.add_argument('--config', type=str, default=None,
                        help='YAML file with counter settings (overrides the flags below)')
    parser.add_argument('--strategy', choices=[s.value for s in Strategy],
                        default=Strategy.rolling.value, help='Counting strategy')
    parser.add_argument('--window-size', type=int, default=10,
                        help='Cycles per window')
    parser.add_argument('--averaging', choices=[a.value for a in Averaging],
                        default=Averaging.mean.value,
                        help='History averaging mode (rolling only)')
    parser.add_argument('--period', type=float, default=1.0,
                        help='Seconds to wait between marks')
    parser.add_argument('--count', type=int, default=0,
                        help='Number of marks (0 runs until Ctrl+C)')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    return parser


def run(counter, period: float, count: int = 0, sleep=time.sleep, out=None) -> int:
    """
    Mark ``counter`` every ``period`` seconds and print its rate.

    Args:
        counter: Any RateCounter
        period: Seconds between marks
        count: Number of marks, 0 for no limit
        sleep: Function used to wait between marks
        out: Stream to print to (default: stdout)

    Returns:
        Number of marks performed
    """
    out = out or sys.stdout
    marks = 0
    try:
        while count <= 0 or marks < count:
            counter.mark()
            marks += 1
            # Simulate the slow operation being measured
            sleep(period)
            print(f"Updating at {counter}", file=out, flush=True)
    except KeyboardInterrupt:
        print("\nStopped.", file=out)
    return marks


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.config:
            config = load_config(args.config)
            logger.info("Loaded counter config from %s", args.config)
        else:
            config = CounterConfig(
                strategy=args.strategy,
                window_size=args.window_size,
                averaging=args.averaging
            )
        counter = build_counter(config)
    except (ConfigError, InvalidWindowSize, FileNotFoundError) as e:
        logger.error("Cannot build counter: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # pydantic rejected the flag values
        logger.error("Invalid counter settings: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    print(f"[INFO] Counting with {config.strategy.value} strategy, "
          f"window size {config.window_size}")
    run(counter, args.period, args.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
