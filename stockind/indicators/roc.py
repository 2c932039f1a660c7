"""
ROC Indicator - Rate of Change.

Percentage change of the close over a fixed lookback, the upstream
series of the Price Momentum Oscillator.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, localcontext

from ..core.config import DEFAULT_CONFIG, IndicatorConfig, decimal_context
from ..core.errors import InsufficientHistoryError, ParameterError
from ..core.models import Quote

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RocResult:
    """Rate of Change at one quote."""

    index: int
    date: date
    roc: Decimal | None = None  # percent, None during lookback


def validate_roc(quotes: Sequence[Quote], lookback_period: int) -> None:
    """Check ROC parameters and history length."""
    if lookback_period <= 0:
        raise ParameterError("Lookback period must be greater than 0 for ROC.")

    qty_history = len(quotes)
    min_history = lookback_period + 1
    if qty_history < min_history:
        raise InsufficientHistoryError(
            "Insufficient history provided for ROC.  "
            f"You provided {qty_history} periods of history "
            f"when at least {min_history} is required.",
            provided=qty_history,
            required=min_history,
        )


def get_roc(
    quotes: Sequence[Quote],
    lookback_period: int = 1,
    config: IndicatorConfig = DEFAULT_CONFIG,
) -> list[RocResult]:
    """
    Calculate Rate of Change for every quote.

    ROC = 100 * (Close - Close[lookback ago]) / Close[lookback ago]

    Args:
        quotes: Cleaned history (see ``prepare_history``)
        lookback_period: Number of periods to look back (default 1)
        config: Supplies the decimal context

    Returns:
        One RocResult per quote; ``roc`` is None for the first
        ``lookback_period`` quotes and where the reference close is zero
    """
    validate_roc(quotes, lookback_period)

    results: list[RocResult] = []
    with localcontext(decimal_context(config)):
        for position, quote in enumerate(quotes):
            value = None
            if position >= lookback_period:
                reference = quotes[position - lookback_period]
                if reference.close != 0:
                    value = 100 * (quote.close - reference.close) / reference.close
                else:
                    logger.warning(f"Zero close at index {reference.index}, ROC undefined at {quote.index}")
            results.append(RocResult(index=quote.index, date=quote.date, roc=value))

    return results
