"""
Quote history loading for reports and tests.
"""

from stockind.history.loader import load_quotes_csv

__all__ = ["load_quotes_csv"]
