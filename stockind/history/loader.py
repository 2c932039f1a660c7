"""
CSV quote loader.

Reads daily OHLCV files with a ``date,open,high,low,close,volume`` header
into Quote records ready for ``prepare_history``.
"""

import csv
import logging
from decimal import InvalidOperation
from pathlib import Path

from ..core.models import Quote

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "open", "high", "low", "close", "volume")


def load_quotes_csv(filepath: str | Path) -> list[Quote]:
    """
    Load quotes from a CSV file, in file order.

    Column names are matched case-insensitively.

    Args:
        filepath: Path to the CSV file

    Returns:
        List of unindexed quotes

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If columns are missing, a row is malformed or the
            file holds no rows
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    quotes: list[Quote] = []
    with path.open(newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = [name.strip().lower() for name in reader.fieldnames or []]
        missing = [column for column in REQUIRED_COLUMNS if column not in fieldnames]
        if missing:
            raise ValueError(f"Missing columns in {path}: {', '.join(missing)}")
        reader.fieldnames = fieldnames

        for line_number, row in enumerate(reader, start=2):
            try:
                quotes.append(Quote.from_row(row))
            except (KeyError, TypeError, AttributeError, ValueError, InvalidOperation) as e:
                raise ValueError(f"Invalid row at {path}:{line_number}: {e}") from e

    if not quotes:
        raise ValueError(f"No data found in {path}")

    logger.info(f"Loaded {len(quotes)} quotes from {path}")
    return quotes
