#!/usr/bin/env python3
"""
Tests for PMO report formatting and the command line interface.

Run with:
    python -m pytest tests/test_report.py -v
"""

import csv
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from stockind.cli import main
from stockind.indicators import PmoResult
from stockind.report import build_pmo_table, format_decimal, result_to_dict

DATA_PATH = Path(__file__).parent / "data" / "history.csv"


class TestFormatting:
    """Tests for value formatting."""

    def test_rounds_for_display(self):
        assert format_decimal(Decimal("1.23456"), 4) == "1.2346"
        assert format_decimal(Decimal("-0.5"), 2) == "-0.50"

    def test_undefined_is_blank(self):
        assert format_decimal(None) == ""

    def test_places_beyond_context_precision(self):
        """Test rounding to more places than the default context holds."""
        assert format_decimal(Decimal("12.5"), 28) == "12.5" + "0" * 27


    def test_result_to_dict(self):
        """Test export rows keep blanks for undefined values."""
        result = PmoResult(index=3, date=date(2020, 1, 3), roc_ema=Decimal("12.5"))
        assert result_to_dict(result, 2) == {
            "index": 3,
            "date": "2020-01-03",
            "roc_ema": "12.50",
            "pmo": "",
            "signal": "",
        }


class TestTable:
    """Tests for the Rich table."""

    def _results(self, count: int) -> list[PmoResult]:
        return [PmoResult(index=i, date=date(2020, 1, i)) for i in range(1, count + 1)]

    def test_trailing_rows(self):
        table = build_pmo_table(self._results(10), rows=3)
        assert table.row_count == 3
        assert len(table.columns) == 6

    def test_all_rows(self):
        table = build_pmo_table(self._results(10), rows=0)
        assert table.row_count == 10


class TestCli:
    """Tests for the stockind command."""

    def test_prints_report(self, capsys):
        """Test a successful run prints the table title."""
        assert main([str(DATA_PATH), "--last", "5"]) == 0
        out = capsys.readouterr().out
        assert "PMO" in out
        assert "2018-12-05" in out
        assert "2018-11-27" not in out

    def test_writes_csv(self, tmp_path, capsys):
        """Test --output exports every result."""
        output = tmp_path / "pmo.csv"
        assert main([str(DATA_PATH), "--output", str(output)]) == 0
        with output.open() as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 502
        assert rows[0]["pmo"] == ""
        assert rows[54]["pmo"] != ""
        assert rows[62]["signal"] == ""
        assert rows[63]["signal"] != ""

    def test_missing_file(self, tmp_path, capsys):
        """Test a missing file exits with status 1."""
        assert main([str(tmp_path / "missing.csv")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_insufficient_history(self, tmp_path, capsys):
        """Test a short history exits with status 1 and explains why."""
        path = tmp_path / "short.csv"
        lines = DATA_PATH.read_text().splitlines()[:11]
        path.write_text("\n".join(lines) + "\n")
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert "Insufficient history" in err
        assert "You provided 10 periods" in err

    def test_bad_period(self, capsys):
        """Test a bad period exits with status 1."""
        assert main([str(DATA_PATH), "--time-period", "1"]) == 1
        assert "Time period" in capsys.readouterr().err

    def test_maximum_decimals(self, capsys):
        """Test the largest accepted --decimals value renders."""
        assert main([str(DATA_PATH), "--last", "1", "--decimals", "28"]) == 0
        assert capsys.readouterr().err == ""

    def test_too_many_decimals(self, capsys):
        """Test --decimals above the calculation precision is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(DATA_PATH), "--decimals", "30"])
        assert exc_info.value.code == 2
        assert "At most 28 decimal places" in capsys.readouterr().err
