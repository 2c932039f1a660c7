"""
PMO Indicator - Price Momentum Oscillator.

Triple-smoothed 1-period Rate of Change:

    ROC-EMA = EMA(ROC, time_period, k=2/time_period) * 10
    PMO     = EMA(ROC-EMA, smoothing_period, k=2/smoothing_period)
    Signal  = EMA(PMO, signal_period, k=2/(signal_period+1))

Each stage seeds with the mean of its first full window of upstream
values and recurses from there. Stages are computed as parallel
index-aligned lists and merged into one result per quote.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, localcontext

from ..core.config import DEFAULT_CONFIG, IndicatorConfig, decimal_context
from ..core.errors import InsufficientHistoryError, ParameterError
from ..core.models import Quote
from .moving_averages import ema_series, first_defined_index, smoothing_constant
from .roc import get_roc

logger = logging.getLogger(__name__)

ROC_EMA_SCALE = Decimal(10)


@dataclass(frozen=True)
class PmoResult:
    """Price Momentum Oscillator values at one quote."""

    index: int
    date: date
    roc_ema: Decimal | None = None  # scaled x10
    pmo: Decimal | None = None
    signal: Decimal | None = None

    @property
    def is_bullish(self) -> bool:
        """True if PMO is above its signal line."""
        return self.pmo is not None and self.signal is not None and self.pmo > self.signal

    @property
    def is_bearish(self) -> bool:
        """True if PMO is below its signal line."""
        return self.pmo is not None and self.signal is not None and self.pmo < self.signal


def validate_pmo(
    quotes: Sequence[Quote],
    time_period: int,
    smoothing_period: int,
    signal_period: int,
    config: IndicatorConfig = DEFAULT_CONFIG,
) -> None:
    """
    Check PMO parameters and history length.

    Raises:
        ParameterError: If a period is outside its domain
        InsufficientHistoryError: If fewer than time_period + smoothing_period
            quotes are given, or a close other than the last is zero
    """
    if time_period <= 1:
        raise ParameterError("Time period must be greater than 1 for PMO.")

    if smoothing_period <= 0:
        raise ParameterError("Smoothing period must be greater than 0 for PMO.")

    if signal_period <= 0:
        raise ParameterError("Signal period must be greater than 0 for PMO.")

    qty_history = len(quotes)
    min_history = time_period + smoothing_period
    if qty_history < min_history:
        recommended = min_history + signal_period + config.recommended_buffer_periods
        raise InsufficientHistoryError(
            "Insufficient history provided for PMO.  "
            f"You provided {qty_history} periods of history when at least {min_history} is required.  "
            "Since this uses several smoothing operations, "
            f"we recommend you use at least {recommended} data points prior to the intended "
            "usage date for maximum precision.",
            provided=qty_history,
            required=min_history,
            recommended=recommended,
        )

    # Every close except the last is a ROC denominator
    for position, quote in enumerate(quotes[:-1], start=1):
        if quote.close == 0:
            raise InsufficientHistoryError(
                f"Zero close at index {quote.index or position} leaves Rate of Change undefined for PMO.  "
                "Remove or correct the quote before calculating."
            )


def roc_ema_line(roc: Sequence[Decimal | None], time_period: int) -> list[Decimal | None]:
    """
    Stage 1: smooth ROC with k = 2 / time_period, then scale by 10.

    Scaling is applied once to the finished series, so the recursion runs
    on unscaled values.
    """
    smoothed = ema_series(roc, time_period, smoothing_constant(time_period))
    return [None if value is None else value * ROC_EMA_SCALE for value in smoothed]


def pmo_line(roc_ema: Sequence[Decimal | None], smoothing_period: int) -> list[Decimal | None]:
    """Stage 2: smooth ROC-EMA with k = 2 / smoothing_period."""
    return ema_series(roc_ema, smoothing_period, smoothing_constant(smoothing_period))


def signal_line(pmo: Sequence[Decimal | None], signal_period: int) -> list[Decimal | None]:
    """Stage 3: smooth PMO with k = 2 / (signal_period + 1)."""
    return ema_series(pmo, signal_period, smoothing_constant(signal_period, offset=1))


def get_pmo(
    quotes: Sequence[Quote],
    time_period: int = DEFAULT_CONFIG.pmo_time_period,
    smoothing_period: int = DEFAULT_CONFIG.pmo_smoothing_period,
    signal_period: int = DEFAULT_CONFIG.pmo_signal_period,
    config: IndicatorConfig = DEFAULT_CONFIG,
) -> list[PmoResult]:
    """
    Calculate the Price Momentum Oscillator for every quote.

    With 1-based indices, ``roc_ema`` is defined from time_period + 1,
    ``pmo`` from time_period + smoothing_period and ``signal`` from
    time_period + smoothing_period + signal_period - 1.

    Args:
        quotes: Cleaned history (see ``prepare_history``)
        time_period: ROC smoothing window (default 35)
        smoothing_period: PMO smoothing window (default 20)
        signal_period: Signal line window (default 10)
        config: Supplies the decimal context and recommended buffer

    Returns:
        One PmoResult per quote, in input order

    Raises:
        ParameterError: If a period is outside its domain
        InsufficientHistoryError: If history is shorter than
            time_period + smoothing_period or holds a zero close
    """
    validate_pmo(quotes, time_period, smoothing_period, signal_period, config)

    roc = get_roc(quotes, 1, config)

    with localcontext(decimal_context(config)):
        roc_ema = roc_ema_line([r.roc for r in roc], time_period)
        pmo = pmo_line(roc_ema, smoothing_period)
        signal = signal_line(pmo, signal_period)

    logger.debug(
        f"PMO({time_period},{smoothing_period},{signal_period}) over {len(quotes)} quotes: "
        f"roc_ema from {first_defined_index(roc_ema)}, pmo from {first_defined_index(pmo)}, "
        f"signal from {first_defined_index(signal)}"
    )

    return [
        PmoResult(index=r.index, date=r.date, roc_ema=e, pmo=p, signal=s)
        for r, e, p, s in zip(roc, roc_ema, pmo, signal, strict=True)
    ]
