"""
stockind - Price Momentum Oscillator and its building blocks over Decimal quote history.
"""

from stockind.core import (
    DEFAULT_CONFIG,
    IndicatorConfig,
    IndicatorError,
    InsufficientHistoryError,
    ParameterError,
    Quote,
    prepare_history,
)
from stockind.history import load_quotes_csv
from stockind.indicators import PmoResult, RocResult, ema_series, get_pmo, get_roc

__all__ = [
    # Core
    "DEFAULT_CONFIG",
    "IndicatorConfig",
    "IndicatorError",
    "InsufficientHistoryError",
    "ParameterError",
    "Quote",
    "prepare_history",
    # History
    "load_quotes_csv",
    # Indicators
    "ema_series",
    "get_roc",
    "get_pmo",
    "RocResult",
    "PmoResult",
]
