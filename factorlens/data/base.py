"""Abstract close-price provider interface."""

from __future__ import annotations

import abc
from typing import Sequence

import pandas as pd


class PriceProvider(abc.ABC):
    """Base class for all close-price providers.

    Subclasses must implement :meth:`fetch_closes`, which returns a *wide*
    DataFrame: one row per date (ascending ``DatetimeIndex`` named
    ``date``), one column of closes per ticker.  Dates on which a ticker did
    not trade hold NaN.
    """

    @abc.abstractmethod
    def fetch_closes(
        self,
        tickers: Sequence[str],
        start: str | pd.Timestamp,
        end: str | pd.Timestamp,
    ) -> pd.DataFrame:
        """Fetch daily closes for the given tickers and date range.

        Parameters
        ----------
        tickers : sequence of str
            Symbols (e.g. ``['AAPL', 'SPY']``).
        start, end : str or Timestamp
            Inclusive date boundaries.

        Returns
        -------
        DataFrame
            Date index, one column per ticker that returned data.
        """


def normalize_tickers(tickers: Sequence[str]) -> list[str]:
    """Strip and upper-case symbols, dropping blanks and duplicates."""
    seen: list[str] = []
    for t in tickers:
        t = t.strip().upper()
        if t and t not in seen:
            seen.append(t)
    return seen
