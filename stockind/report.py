"""
PMO report formatting.

Turns PmoResult lists into Rich tables for the terminal and plain dicts
for CSV export. Values are rounded here only, never during calculation.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from rich.table import Table
from rich.text import Text

from stockind.indicators.pmo import PmoResult


def format_decimal(value: Decimal | None, places: int = 4) -> str:
    """Round a value for display; empty string when undefined."""
    if value is None:
        return ""
    quantum = Decimal(1).scaleb(-places)
    # Room for every integer digit plus the requested places
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return str(value.quantize(quantum, rounding=ROUND_HALF_UP))


def result_to_dict(result: PmoResult, places: int = 4) -> dict:
    """Convert a result to a dictionary for CSV export."""
    return {
        "index": result.index,
        "date": result.date.isoformat(),
        "roc_ema": format_decimal(result.roc_ema, places),
        "pmo": format_decimal(result.pmo, places),
        "signal": format_decimal(result.signal, places),
    }


def _trend_text(result: PmoResult) -> Text:
    if result.is_bullish:
        return Text("above", style="green")
    if result.is_bearish:
        return Text("below", style="red")
    return Text("")


def build_pmo_table(
    results: Sequence[PmoResult],
    rows: int = 20,
    places: int = 4,
    title: str | None = None,
) -> Table:
    """
    Build a Rich Table of the most recent results.

    Args:
        results: Full PMO result list
        rows: Number of trailing results to show (0 shows all)
        places: Decimal places for values
        title: Optional table title

    Returns:
        Table with Index, Date, ROC-EMA, PMO, Signal and PMO-vs-Signal columns
    """
    table = Table(title=title, show_edge=False, padding=(0, 1))
    table.add_column("Index", justify="right", style="dim", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("ROC-EMA", justify="right")
    table.add_column("PMO", justify="right")
    table.add_column("Signal", justify="right")
    table.add_column("PMO vs Signal")

    shown = results[-rows:] if rows > 0 else results
    for result in shown:
        table.add_row(
            str(result.index),
            result.date.isoformat(),
            format_decimal(result.roc_ema, places),
            format_decimal(result.pmo, places),
            format_decimal(result.signal, places),
            _trend_text(result),
        )

    return table
