#!/usr/bin/env python3
"""
CLI for computing the Price Momentum Oscillator from a CSV of daily quotes.

Usage:
    python -m stockind data/history.csv
    python -m stockind data/history.csv --time-period 35 --smoothing-period 20 --signal-period 10

The CSV needs a header with date, open, high, low, close and volume columns.
"""

import argparse
import csv
import logging
import sys
from pathlib import Path

from rich.console import Console

from stockind.core.cleaners import prepare_history
from stockind.core.config import DEFAULT_CONFIG
from stockind.core.errors import IndicatorError
from stockind.history.loader import load_quotes_csv
from stockind.indicators.pmo import get_pmo
from stockind.report import build_pmo_table, result_to_dict

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """Parse a non-negative integer argument."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid integer: '{value}'") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"Must not be negative: {number}")
    return number


def decimal_places(value: str) -> int:
    """Parse a decimal places argument, at most the calculation precision."""
    number = non_negative_int(value)
    if number > DEFAULT_CONFIG.decimal_precision:
        raise argparse.ArgumentTypeError(
            f"At most {DEFAULT_CONFIG.decimal_precision} decimal places are supported, got {number}"
        )
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stockind",
        description="Compute the Price Momentum Oscillator for a CSV of daily quotes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Default periods (35, 20, 10), last 20 rows
    %(prog)s data/history.csv

    # Faster settings, show every row
    %(prog)s data/history.csv --time-period 20 --smoothing-period 10 --last 0

    # Export every result to CSV
    %(prog)s data/history.csv --output pmo.csv
        """,
    )

    parser.add_argument("path", type=Path, help="CSV file with date,open,high,low,close,volume")
    parser.add_argument(
        "--time-period",
        "-t",
        type=int,
        default=DEFAULT_CONFIG.pmo_time_period,
        help=f"ROC smoothing period (default: {DEFAULT_CONFIG.pmo_time_period})",
    )
    parser.add_argument(
        "--smoothing-period",
        "-s",
        type=int,
        default=DEFAULT_CONFIG.pmo_smoothing_period,
        help=f"PMO smoothing period (default: {DEFAULT_CONFIG.pmo_smoothing_period})",
    )
    parser.add_argument(
        "--signal-period",
        "-g",
        type=int,
        default=DEFAULT_CONFIG.pmo_signal_period,
        help=f"Signal line period (default: {DEFAULT_CONFIG.pmo_signal_period})",
    )
    parser.add_argument(
        "--last",
        "-n",
        type=non_negative_int,
        default=DEFAULT_CONFIG.report_rows,
        help=f"Trailing rows to show, 0 for all (default: {DEFAULT_CONFIG.report_rows})",
    )
    parser.add_argument(
        "--decimals",
        "-d",
        type=decimal_places,
        default=DEFAULT_CONFIG.report_decimals,
        help=f"Decimal places to show (default: {DEFAULT_CONFIG.report_decimals})",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Also write every result to this CSV file",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")
    return parser


def write_results_csv(path: Path, rows: list[dict]) -> None:
    """Write exported result rows to CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["index", "date", "roc_ema", "pmo", "signal"])
        writer.writeheader()
        writer.writerows(rows)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console()
    try:
        history = prepare_history(load_quotes_csv(args.path))
        results = get_pmo(history, args.time_period, args.smoothing_period, args.signal_period)
    except (IndicatorError, FileNotFoundError, ValueError) as e:
        logger.error(f"PMO calculation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    title = (
        f"PMO({args.time_period},{args.smoothing_period},{args.signal_period}) "
        f"{args.path.name}: {history[0].date} to {history[-1].date}"
    )
    console.print(build_pmo_table(results, rows=args.last, places=args.decimals, title=title))

    if args.output:
        write_results_csv(args.output, [result_to_dict(r, args.decimals) for r in results])
        console.print(f"Saved {len(results)} results to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
