#!/usr/bin/env python3
"""Print a regression channel report for a file of closing prices.

The input is either a JSON array of numbers or a text/CSV file with one
close per line (the last column is used when a line has several). Lines
that do not parse as numbers, such as a header row, are skipped.

Usage:
    python scripts/analyze_prices.py closes.csv --symbol AAPL --days 90
    python scripts/analyze_prices.py closes.csv --symbol AAPL --all-periods
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lrc_app.config.loader import ConfigLoader
from lrc_app.config.validation import ConfigValidator
from lrc_app.errors import DataQualityError
from lrc_app.logging.config import configure_logging, get_logger
from lrc_app.report.summary import build_channel_report, build_period_reports

logger = get_logger(__name__)


def read_prices(path: Path) -> List[float]:
    """Read closing prices, oldest first."""
    text = path.read_text()

    if text.lstrip().startswith("["):
        return json.loads(text)

    prices = []
    for line in text.splitlines():
        fields = [f.strip() for f in line.split(",") if f.strip()]
        if not fields:
            continue
        try:
            prices.append(float(fields[-1]))
        except ValueError:
            logger.debug("Skipping non-numeric line", line=line[:80])
    return prices


def main() -> int:
    parser = argparse.ArgumentParser(description="Linear regression channel report")
    parser.add_argument("path", type=Path, help="JSON array or one-close-per-line file")
    parser.add_argument("--symbol", help="Symbol label for the report")
    parser.add_argument("--days", type=int, help="Number of most recent closes to analyze")
    parser.add_argument("--all-periods", action="store_true",
                        help="Report every configured period option instead of --days")
    parser.add_argument("--multiplier", type=float, help="Standard deviation multiplier")
    parser.add_argument("--config-dir", type=Path, help="Directory holding symbols.yaml")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--json-logs", action="store_true")
    args = parser.parse_args()

    configure_logging(level=args.log_level, format_json=args.json_logs)

    loader = ConfigLoader.create(args.config_dir)
    overrides = {}
    if args.multiplier is not None:
        overrides["channel"] = {"std_dev_multiplier": args.multiplier}

    errors = ConfigValidator.validate_config(loader.merge_config(args.symbol, overrides))
    if errors:
        for error in errors:
            print(f"{error.field}: {error.message} (got: {error.value})", file=sys.stderr)
        return 2

    config = loader.build_config(args.symbol, overrides)

    try:
        prices = read_prices(args.path)
        if args.all_periods:
            report = build_period_reports(prices, symbol=args.symbol, config=config)
        else:
            report = build_channel_report(
                prices,
                symbol=args.symbol,
                days=args.days,
                config=config
            )
    except DataQualityError as e:
        logger.error("Failed to calculate regression channel", error=str(e))
        print(json.dumps({
            "error": "Failed to calculate regression channel",
            "details": str(e),
        }))
        return 1

    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
