"""
History cleaning - turns raw quotes into indexed, date-ordered history.

Indicator functions assume their input went through ``prepare_history``.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace

from .errors import InsufficientHistoryError
from .models import Quote

logger = logging.getLogger(__name__)


def prepare_history(quotes: Iterable[Quote]) -> list[Quote]:
    """
    Sort quotes by date and assign 1-based indices.

    Args:
        quotes: Quotes in any order

    Returns:
        New list of quotes, ascending by date, with ``index`` set 1..N

    Raises:
        InsufficientHistoryError: If no quotes are given or two quotes
            share the same date
    """
    ordered = sorted(quotes, key=lambda q: q.date)
    if not ordered:
        raise InsufficientHistoryError("No historical quotes provided.", provided=0)

    history: list[Quote] = []
    previous = None
    for position, quote in enumerate(ordered, start=1):
        if previous is not None and quote.date == previous.date:
            raise InsufficientHistoryError(
                f"Duplicate date found on {quote.date.isoformat()}."
            )
        history.append(replace(quote, index=position))
        previous = quote

    logger.debug(
        f"Prepared {len(history)} quotes from {history[0].date.isoformat()} "
        f"to {history[-1].date.isoformat()}"
    )
    return history
