"""
Benchmarking for the rate counting strategies.
Measures the cost of a single mark() for discrete and rolling counters
across window sizes.
"""

import time
import json
import argparse
import statistics
from pathlib import Path
from typing import Dict, List, Sequence

import numpy as np

from ratecounter import DiscreteRateCounter, RateCounter, RollingRateCounter


class BenchmarkRunner:
    """Run mark() cost benchmarks for rate counters."""

    def __init__(self, warmup_iterations: int = 100):
        """
        Initialize benchmark runner.

        Args:
            warmup_iterations: Number of warmup marks
        """
        self.warmup_iterations = warmup_iterations

    def warmup(self, counter: RateCounter):
        """
        Fill the counter's window before timing.

        Args:
            counter: Counter to warm up
        """
        for _ in range(self.warmup_iterations):
            counter.mark()

    def benchmark_counter(self, counter: RateCounter, num_iterations: int = 1000) -> Dict:
        """
        Benchmark mark() latency and throughput.

        Args:
            counter: Counter under test
            num_iterations: Number of timed marks

        Returns:
            Dictionary with latency statistics (microseconds) and throughput
        """
        if num_iterations < 2:
            raise ValueError("num_iterations must be at least 2")

        self.warmup(counter)

        latencies = []
        total_start = time.perf_counter()

        for _ in range(num_iterations):
            start = time.perf_counter()
            counter.mark()
            end = time.perf_counter()
            latencies.append((end - start) * 1e6)

        total_time = time.perf_counter() - total_start

        # Calculate statistics
        latencies.sort()
        return {
            'latency_avg_us': statistics.mean(latencies),
            'latency_median_us': statistics.median(latencies),
            'latency_p50_us': float(np.percentile(latencies, 50)),
            'latency_p90_us': float(np.percentile(latencies, 90)),
            'latency_p95_us': float(np.percentile(latencies, 95)),
            'latency_p99_us': float(np.percentile(latencies, 99)),
            'latency_min_us': min(latencies),
            'latency_max_us': max(latencies),
            'latency_std_us': statistics.stdev(latencies),
            'throughput_marks_per_s': num_iterations / total_time if total_time > 0 else float('inf'),
            'iterations': num_iterations,
        }

    def compare(self, window_sizes: Sequence[int], num_iterations: int = 1000) -> List[Dict]:
        """
        Benchmark both strategies for each window size.

        Args:
            window_sizes: Window sizes to test (each >= 1)
            num_iterations: Number of timed marks per run

        Returns:
            One result dict per (strategy, window size)
        """
        results = []
        for window_size in window_sizes:
            for strategy, counter in (
                ('discrete', DiscreteRateCounter(window_size)),
                ('rolling', RollingRateCounter(window_size)),
            ):
                print(f"[INFO] Benchmarking {strategy} counter (window {window_size})...")
                result = self.benchmark_counter(counter, num_iterations)
                results.append({
                    'strategy': strategy,
                    'window_size': window_size,
                    **result
                })
        return results


def main(argv=None):
    """Main benchmarking entry point."""
    parser = argparse.ArgumentParser(description='Benchmark rate counting strategies')
    parser.add_argument('--window-sizes', type=int, nargs='+', default=[10, 100, 1000],
                        help='Window sizes to benchmark')
    parser.add_argument('--iterations', type=int, default=1000,
                        help='Timed marks per run')
    parser.add_argument('--warmup', type=int, default=100,
                        help='Warmup marks')
    parser.add_argument('--output', type=str, default=None,
                        help='Optional output JSON file')

    args = parser.parse_args(argv)

    runner = BenchmarkRunner(warmup_iterations=args.warmup)
    results = runner.compare(args.window_sizes, args.iterations)

    print(f"\n{'='*60}")
    print("BENCHMARK RESULTS")
    print(f"{'='*60}\n")

    for result in results:
        print(f"{result['strategy'].upper()} (window {result['window_size']})")
        print(f"  Mark latency (avg):  {result['latency_avg_us']:.2f} us")
        print(f"  Mark latency (p95):  {result['latency_p95_us']:.2f} us")
        print(f"  Throughput:          {result['throughput_marks_per_s']:.0f} marks/s")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(results, f, indent=2)
        print(f"\n[INFO] Results saved to: {output_path}")


if __name__ == "__main__":
    main()
