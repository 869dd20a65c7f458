"""Yahoo Finance close-price provider via the ``yfinance`` package.

Install the optional dependency with::

    pip install "factorlens[yfinance]"

yfinance covers US equities and the factor ETFs used by default
(SPY, IJR, IWD, MTUM).  Closes are auto-adjusted for splits and dividends.

.. note::
   Yahoo Finance is a free, unofficial API.  Rate limits and data
   availability may change without notice.
"""

from __future__ import annotations

import warnings
from typing import Sequence

import pandas as pd

from factorlens.data.base import PriceProvider, normalize_tickers
from factorlens.utils.validation import FactorlensValidationError


def _require_yfinance():
    try:
        import yfinance
        return yfinance
    except ImportError:
        raise ImportError(
            "yfinance is required for YFinanceProvider.  "
            "Install it with:  pip install 'factorlens[yfinance]'  "
            "or:  pip install yfinance"
        )


class YFinanceProvider(PriceProvider):
    """Fetch daily closes from Yahoo Finance.

    Parameters
    ----------
    auto_adjust : bool
        Use split- and dividend-adjusted closes (default True).
    progress : bool
        Show a yfinance download progress bar (default False).

    Examples
    --------
    >>> from factorlens.data import YFinanceProvider
    >>> closes = YFinanceProvider().fetch_closes(["AAPL", "SPY"], "2023-01-01", "2023-12-31")
    """

    def __init__(self, auto_adjust: bool = True, progress: bool = False) -> None:
        self.auto_adjust = auto_adjust
        self.progress = progress

    def fetch_closes(
        self,
        tickers: Sequence[str],
        start: str | pd.Timestamp,
        end: str | pd.Timestamp,
    ) -> pd.DataFrame:
        yf = _require_yfinance()

        tickers = normalize_tickers(tickers)
        if not tickers:
            raise FactorlensValidationError("tickers must be a non-empty sequence.")

        try:
            raw = yf.download(
                tickers=tickers,
                start=str(pd.Timestamp(start).date()),
                # yfinance treats ``end`` as exclusive
                end=str((pd.Timestamp(end) + pd.Timedelta(days=1)).date()),
                auto_adjust=self.auto_adjust,
                progress=self.progress,
                threads=True,
            )
        except Exception as e:
            raise FactorlensValidationError(
                f"Data source/network error fetching {tickers}: {e}"
            ) from e

        if raw is None or raw.empty:
            raise FactorlensValidationError(
                f"No data returned for tickers={tickers}, "
                f"start={start}, end={end}. "
                "Verify ticker symbols exist on Yahoo Finance."
            )

        closes = self._extract_closes(raw, tickers)

        missing_tickers = [
            t for t in tickers if t not in closes.columns or closes[t].isna().all()
        ]
        if missing_tickers:
            warnings.warn(f"Tickers not found in data source: {missing_tickers}")
        closes = closes[[t for t in tickers if t not in missing_tickers]]
        if closes.empty:
            raise FactorlensValidationError(
                f"No valid data returned from yfinance. "
                f"Tickers not found: {missing_tickers}"
            )

        closes.index = pd.to_datetime(closes.index).normalize()
        closes.index.name = "date"
        closes.columns.name = None
        return closes.sort_index()

    def _extract_closes(self, raw: pd.DataFrame, tickers: list[str]) -> pd.DataFrame:
        """Pull the close column(s) out of a yfinance download frame."""
        field = "Close" if self.auto_adjust else "Adj Close"
        # yfinance >=0.2 returns MultiIndex columns (field, ticker) even for
        # a single ticker; older releases return flat columns.
        if isinstance(raw.columns, pd.MultiIndex):
            lvl0 = set(raw.columns.get_level_values(0))
            if field in lvl0:
                closes = raw[field]
            else:
                closes = raw.xs(field, level=1, axis=1)
        else:
            if field not in raw.columns:
                raise FactorlensValidationError(
                    f"yfinance data missing {field!r} column."
                )
            closes = raw[[field]].rename(columns={field: tickers[0]})
        closes = closes.copy()
        closes.columns = [str(c).upper() for c in closes.columns]
        return closes
