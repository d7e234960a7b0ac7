#!/usr/bin/env python3
"""
Basic Usage Example - LRC Regression Channel Engine

This script demonstrates the basic usage of the regression channel engine
with simulated closing prices. It shows how to:
- Run a one-off analysis with analyze()
- Use a configured ChannelAnalyzer
- Build the dashboard report payload

Run: python examples/basic_usage.py
"""

import json
import math
from typing import List

from lrc_app.channel import ChannelAnalyzer, analyze
from lrc_app.config.loader import ConfigLoader
from lrc_app.logging.config import configure_logging
from lrc_app.report import build_channel_report


def create_sample_prices(count: int, start: float, drift: float, swing: float) -> List[float]:
    """Create a trending close series with a regular swing around the trend."""
    return [start + i * drift + swing * math.sin(i / 5.0) for i in range(count)]


def demo_analyze() -> None:
    print("=== analyze() ===")
    prices = create_sample_prices(60, start=100.0, drift=0.4, swing=2.0)
    prices[-1] += 6.0  # late spike above the channel

    result = analyze(prices)
    print(f"Equation:      {result.equation}")
    print(f"R²:            {result.regression.r_squared:.4f}")
    print(f"Std deviation: {result.standard_deviation:.4f}")
    print(f"Latest close:  {result.current_price:.2f} "
          f"(band {result.current_lower_band:.2f} - {result.current_upper_band:.2f})")
    print(f"Signal:        {result.signal.value} ({result.signal_strength:.1f})")


def demo_configured_analyzer() -> None:
    print("\n=== ChannelAnalyzer with per-symbol config ===")
    loader = ConfigLoader.create()
    config = loader.build_config("TSLA")
    analyzer = ChannelAnalyzer(config)

    prices = create_sample_prices(90, start=250.0, drift=-0.8, swing=6.0)
    result = analyzer.analyze(prices, context={"symbol": "TSLA"})
    print(f"Multiplier:    {config.channel.std_dev_multiplier}")
    print(f"Channel width: {result.channel_width:.2f}")
    print(f"Signal:        {result.signal.value} ({result.signal_strength:.1f})")


def demo_report() -> None:
    print("\n=== Dashboard report ===")
    prices = create_sample_prices(120, start=180.0, drift=0.2, swing=3.0)
    report = build_channel_report(prices, symbol="aapl", days=90)
    print(json.dumps(report, indent=2))


def main() -> None:
    configure_logging(level="INFO")
    demo_analyze()
    demo_configured_analyzer()
    demo_report()


if __name__ == "__main__":
    main()
