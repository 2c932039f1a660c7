"""
Data models for quote history.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Quote:
    """A single OHLCV quote.

    ``index`` is the 1-based position in cleaned history; it is 0 until
    the quote has passed through ``prepare_history``.
    """

    date: date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    index: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for CSV export."""
        return {
            "date": self.date.isoformat(),
            "open": str(self.open),
            "high": str(self.high),
            "low": str(self.low),
            "close": str(self.close),
            "volume": str(self.volume),
        }

    @classmethod
    def from_row(cls, row: dict) -> "Quote":
        """
        Create from a CSV row.

        Expects ISO dates (``2018-01-02``, optionally with a time part)
        and numeric strings for the price and volume columns.
        """
        raw_date = row["date"].strip()
        return cls(
            date=date.fromisoformat(raw_date[:10]),
            open=Decimal(row["open"]),
            high=Decimal(row["high"]),
            low=Decimal(row["low"]),
            close=Decimal(row["close"]),
            volume=Decimal(row["volume"]),
        )
