#!/usr/bin/env python3
"""
Unit tests for history loading and cleaning.

Run with:
    python -m pytest tests/test_history.py -v
"""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from stockind.core import InsufficientHistoryError, Quote, prepare_history
from stockind.history import load_quotes_csv

DATA_PATH = Path(__file__).parent / "data" / "history.csv"


def make_quote(day: date, close: str = "100") -> Quote:
    """Helper to create an unindexed quote."""
    price = Decimal(close)
    return Quote(date=day, open=price, high=price, low=price, close=price, volume=Decimal(1))


class TestPrepareHistory:
    """Tests for history cleaning."""

    def test_sorts_and_indexes(self):
        """Test quotes are ordered by date and indexed from 1."""
        raw = [
            make_quote(date(2020, 1, 3), "3"),
            make_quote(date(2020, 1, 1), "1"),
            make_quote(date(2020, 1, 2), "2"),
        ]
        history = prepare_history(raw)
        assert [q.index for q in history] == [1, 2, 3]
        assert [q.close for q in history] == [1, 2, 3]

    def test_input_untouched(self):
        """Test the raw quotes keep their unset index."""
        raw = [make_quote(date(2020, 1, 1))]
        prepare_history(raw)
        assert raw[0].index == 0

    def test_duplicate_date(self):
        """Test two quotes on one date are rejected."""
        raw = [make_quote(date(2020, 1, 1)), make_quote(date(2020, 1, 1), "101")]
        with pytest.raises(InsufficientHistoryError, match="Duplicate date"):
            prepare_history(raw)

    def test_empty(self):
        """Test an empty history is rejected."""
        with pytest.raises(InsufficientHistoryError):
            prepare_history([])


class TestLoadQuotesCsv:
    """Tests for the CSV loader."""

    def test_loads_fixture(self):
        """Test the 502-quote fixture loads in file order."""
        quotes = load_quotes_csv(DATA_PATH)
        assert len(quotes) == 502
        first = quotes[0]
        assert first.date == date(2017, 1, 3)
        assert first.open == Decimal("213.10")
        assert first.high == Decimal("218.16")
        assert first.low == Decimal("211.76")
        assert first.close == Decimal("216.47")
        assert first.volume == Decimal("66339385")
        assert quotes[-1].date == date(2018, 12, 5)

    def test_header_case_and_datetime(self, tmp_path):
        """Test header names are case-insensitive and times are dropped."""
        path = tmp_path / "quotes.csv"
        path.write_text("Date,Open,High,Low,Close,Volume\n2020-01-02T00:00:00,1,2,0.5,1.5,10\n")
        quotes = load_quotes_csv(path)
        assert quotes[0].date == date(2020, 1, 2)
        assert quotes[0].close == Decimal("1.5")

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_quotes_csv(tmp_path / "missing.csv")

    def test_missing_column(self, tmp_path):
        """Test a missing column is reported."""
        path = tmp_path / "quotes.csv"
        path.write_text("date,open,high,low,close\n2020-01-02,1,2,0.5,1.5\n")
        with pytest.raises(ValueError, match="volume"):
            load_quotes_csv(path)

    def test_bad_number(self, tmp_path):
        """Test a malformed value reports its line."""
        path = tmp_path / "quotes.csv"
        path.write_text("date,open,high,low,close,volume\n2020-01-02,1,2,0.5,abc,10\n")
        with pytest.raises(ValueError, match=":2"):
            load_quotes_csv(path)

    def test_empty_file(self, tmp_path):
        """Test a header-only file is rejected."""
        path = tmp_path / "quotes.csv"
        path.write_text("date,open,high,low,close,volume\n")
        with pytest.raises(ValueError, match="No data"):
            load_quotes_csv(path)

    def test_round_trip_row(self):
        """Test to_dict output is accepted by from_row."""
        quote = make_quote(date(2020, 1, 1), "12.34")
        assert Quote.from_row(quote.to_dict()) == quote
