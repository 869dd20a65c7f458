"""CLI entrypoint for factor exposure analysis.

Usage:
    python -m app.run_analysis --ticker AAPL
    python -m app.run_analysis --ticker MSFT --period 3year --json
    python -m app.run_analysis --ticker AAPL --source csv --csv-dir data/
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import AnalysisConfig
from app.exposure_analyzer import ExposureAnalyzer
from factorlens.utils.validation import FactorlensError


def main(argv: list[str] | None = None) -> int:
    defaults = AnalysisConfig()
    parser = argparse.ArgumentParser(description="factorlens Factor Exposure Analysis")
    parser.add_argument("--ticker", required=True, help="Symbol to analyse")
    parser.add_argument(
        "--period", default=defaults.default_period,
        choices=sorted(defaults.period_trading_days),
    )
    parser.add_argument(
        "--source", default=defaults.data_source,
        choices=["yfinance", "csv", "synthetic"],
    )
    parser.add_argument("--csv-dir", default=defaults.csv_dir, help="Directory of <TICKER>.csv files")
    parser.add_argument("--end-date", default=None, help="Last date of the window (default today)")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = AnalysisConfig(data_source=args.source, csv_dir=args.csv_dir)
    try:
        report = ExposureAnalyzer(config).run(args.ticker, args.period, end=args.end_date)
    except FactorlensError as e:
        print(f"Analysis failed: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    r2 = "undefined" if report.undefined_fit else f"{report.r_squared:.3f}"
    print("\n" + "=" * 60)
    print(f"FACTOR EXPOSURES: {report.ticker} ({report.period})")
    print("=" * 60)
    for e in report.exposures:
        print(f"  {e.factor:<12s} {e.exposure:>+8.3f}")
    print("-" * 60)
    print(f"  R-squared:    {r2}")
    print(f"  Observations: {report.n_observations}")
    if report.n_fallbacks:
        print(f"  Fallbacks:    {report.n_fallbacks} missing value(s) set to 0.0")
    print("=" * 60)
    print(report.interpretation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
