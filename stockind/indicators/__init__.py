"""
Technical Indicators Module - Decimal series calculations over quote history.

All functions are stateless: they take cleaned quotes (or an upstream
series) and return one result per quote.
"""

from .moving_averages import EmaState, ema_series, ema_step, first_defined_index, smoothing_constant
from .pmo import PmoResult, get_pmo, pmo_line, roc_ema_line, signal_line, validate_pmo
from .roc import RocResult, get_roc, validate_roc

__all__ = [
    # Moving Averages
    "EmaState",
    "ema_step",
    "ema_series",
    "smoothing_constant",
    "first_defined_index",
    # ROC
    "get_roc",
    "validate_roc",
    "RocResult",
    # PMO
    "get_pmo",
    "validate_pmo",
    "roc_ema_line",
    "pmo_line",
    "signal_line",
    "PmoResult",
]
