"""Return series construction.

Raw close prices arrive from a provider as a date-indexed Series.  The
analysis works on *percentage* returns, one per period, with the first
observation seeded at exactly 0 because it has no prior close.
"""

from __future__ import annotations

from typing import Any, NamedTuple

import pandas as pd

from factorlens.utils.validation import FactorlensValidationError, as_return_series


class TimedObservation(NamedTuple):
    """A single dated return, expressed as a percentage."""

    date: Any
    value: float


def percent_returns(closes: pd.Series) -> pd.Series:
    """Period-over-period percentage change of a close-price series.

    ``r_t = (P_t - P_{t-1}) / P_{t-1} * 100``.  The series is sorted by date
    first; the earliest observation gets a return of exactly ``0.0``.

    Parameters
    ----------
    closes : Series
        Close prices indexed by date.

    Returns
    -------
    Series
        Percentage returns in ascending date order, same length as *closes*.
    """
    closes = as_return_series(closes, "closes").sort_index(kind="stable")
    if closes.empty:
        return closes
    prev = closes.shift(1)
    returns = (closes - prev) / prev * 100.0
    returns.iloc[0] = 0.0
    return returns


def trim_to_period(closes: pd.Series, trading_days: int) -> pd.Series:
    """Keep the most recent *trading_days* observations, oldest first."""
    if trading_days < 1:
        raise FactorlensValidationError(
            f"trading_days must be positive; got {trading_days}."
        )
    return closes.sort_index(kind="stable").iloc[-trading_days:]


def to_observations(returns: pd.Series) -> list[TimedObservation]:
    """Convert a return Series to a list of :class:`TimedObservation`."""
    return [TimedObservation(d, float(v)) for d, v in returns.items()]
