"""
Core types shared by every indicator: quotes, errors, configuration.
"""

from .cleaners import prepare_history
from .config import DEFAULT_CONFIG, IndicatorConfig, decimal_context
from .errors import IndicatorError, InsufficientHistoryError, ParameterError
from .models import Quote

__all__ = [
    "DEFAULT_CONFIG",
    "IndicatorConfig",
    "decimal_context",
    "IndicatorError",
    "InsufficientHistoryError",
    "ParameterError",
    "Quote",
    "prepare_history",
]
