#!/usr/bin/env python3
"""Performance benchmark script for LRC App."""

import math
import sys
import time
from pathlib import Path
from typing import Dict, List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lrc_app.channel.analyzer import analyze
from lrc_app.config.defaults import get_default_config


def generate_sample_prices(count: int) -> List[float]:
    """Generate a drifting, oscillating close series."""
    return [100.0 + i * 0.05 + 3.0 * math.sin(i / 7.0) for i in range(count)]


def benchmark_analyze(series_length: int, iterations: int = 200) -> Dict[str, float]:
    """Benchmark channel analysis for one series length."""
    print(f"🏃 Benchmarking analyze() on {series_length} prices x {iterations} runs...")

    prices = generate_sample_prices(series_length)

    # Warm up
    for _ in range(5):
        analyze(prices)

    start_time = time.perf_counter()
    for _ in range(iterations):
        analyze(prices)
    total_time = time.perf_counter() - start_time

    return {
        "total_time": total_time,
        "avg_time_ms": total_time / iterations * 1000,
        "series_per_second": iterations / total_time,
    }


def main():
    """Run benchmarks for the dashboard's period options plus one long series."""
    print("📈 LRC App performance benchmark")

    period_options = get_default_config().report.period_options
    for length in (*period_options, 5000):
        results = benchmark_analyze(length)
        print(f"  • {length:>5} prices: {results['avg_time_ms']:.3f} ms/series "
              f"({results['series_per_second']:.0f} series/s)")


if __name__ == "__main__":
    main()
