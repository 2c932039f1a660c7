"""
Moving Average Primitives - SMA-seeded exponential smoothing.

Pure functions over index-aligned sequences of optional Decimal values.
Arithmetic uses the active decimal context; callers enter the indicator
context once around a whole calculation.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import Decimal
from functools import reduce


def smoothing_constant(period: int, offset: int = 0) -> Decimal:
    """
    Calculate the smoothing constant k = 2 / (period + offset).

    Classic EMA uses offset 1; the PMO ROC and PMO line stages use 0.

    Args:
        period: Smoothing window length
        offset: Added to the period in the denominator

    Returns:
        Smoothing constant as a Decimal
    """
    return Decimal(2) / Decimal(period + offset)


@dataclass(frozen=True)
class EmaState:
    """Accumulator carried through one forward pass of ``ema_series``.

    Until ``count`` reaches ``period`` the state only sums upstream values;
    afterwards ``last`` holds the previous output.
    """

    period: int
    smoothing: Decimal
    count: int = 0
    total: Decimal = Decimal(0)
    last: Decimal | None = None


def ema_step(state: EmaState, value: Decimal | None) -> tuple[Decimal | None, EmaState]:
    """
    Advance the smoothing by one upstream value.

    Args:
        state: Accumulator from the previous step
        value: Upstream value at this index (None before upstream starts)

    Returns:
        (output at this index, new state)

    Raises:
        ValueError: If upstream goes undefined after it has started
    """
    if value is None:
        if state.count:
            raise ValueError("Upstream series has an undefined value after it started")
        return None, state

    if state.last is not None:
        current = (value - state.last) * state.smoothing + state.last
        return current, replace(state, last=current)

    count = state.count + 1
    total = state.total + value
    if count < state.period:
        return None, replace(state, count=count, total=total)

    # Seed with the mean of the warm-up window
    seed = total / state.period
    return seed, replace(state, count=count, total=total, last=seed)


def ema_series(
    values: Sequence[Decimal | None],
    period: int,
    smoothing: Decimal | None = None,
) -> list[Decimal | None]:
    """
    Calculate an SMA-seeded EMA, index-aligned with its input.

    If the upstream is first defined at 1-based index S, the output is
    None before index S + period - 1, equals the mean of the ``period``
    upstream values ending there (inclusive) at that index, and follows
    ``(value - previous) * smoothing + previous`` afterwards.

    Args:
        values: Upstream values, None where undefined (leading only)
        period: Warm-up window length
        smoothing: Smoothing constant (default 2 / (period + 1))

    Returns:
        List of outputs, same length as ``values``
    """
    if period <= 0:
        raise ValueError("period must be positive")

    if smoothing is None:
        smoothing = smoothing_constant(period, offset=1)

    def fold(acc: tuple[list[Decimal | None], EmaState], value: Decimal | None):
        outputs, state = acc
        output, state = ema_step(state, value)
        outputs.append(output)
        return outputs, state

    outputs, _ = reduce(fold, values, ([], EmaState(period=period, smoothing=smoothing)))
    return outputs


def first_defined_index(values: Sequence[Decimal | None]) -> int | None:
    """1-based index of the first defined value, or None if there is none."""
    for position, value in enumerate(values, start=1):
        if value is not None:
            return position
    return None
