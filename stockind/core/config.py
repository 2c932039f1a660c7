"""
Indicator configuration and defaults.

Centralizes indicator periods, decimal arithmetic settings and report
limits so callers and the CLI share one set of values.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context


@dataclass(frozen=True)
class IndicatorConfig:
    """Configuration for indicator calculations and reporting.

    Periods are counted in quotes (one quote per period).
    """

    # =========================================================
    # Price Momentum Oscillator
    # =========================================================

    # ROC smoothing window (first EMA stage)
    pmo_time_period: int = 35

    # PMO line smoothing window (second EMA stage)
    pmo_smoothing_period: int = 20

    # Signal line window (third EMA stage)
    pmo_signal_period: int = 10

    # Extra leading quotes recommended on top of the minimum history.
    # Recursive averages only converge asymptotically.
    recommended_buffer_periods: int = 250

    # =========================================================
    # Decimal Arithmetic
    # =========================================================

    # Significant digits kept by every calculation
    decimal_precision: int = 28

    decimal_rounding: str = ROUND_HALF_EVEN

    # =========================================================
    # Reporting
    # =========================================================

    # Trailing rows shown by the CLI report
    report_rows: int = 20

    # Decimal places shown for indicator values
    report_decimals: int = 4


# Default configuration instance
DEFAULT_CONFIG = IndicatorConfig()


def decimal_context(config: IndicatorConfig = DEFAULT_CONFIG) -> Context:
    """Build the decimal context used for indicator arithmetic."""
    return Context(prec=config.decimal_precision, rounding=config.decimal_rounding)
