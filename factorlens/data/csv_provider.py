"""CSV-based close-price provider.

Reads per-ticker CSV files from a local directory.  Each file must contain a
``Date`` column and a ``Close`` column (case-insensitive).  An ``Adj Close``
column is preferred when present.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from factorlens.data.base import PriceProvider, normalize_tickers
from factorlens.utils.validation import FactorlensValidationError


class CsvProvider(PriceProvider):
    """Read daily closes from one ``<TICKER>.csv`` file per ticker.

    Parameters
    ----------
    directory : str or Path
        Folder containing the CSV files.
    date_column : str
        Name of the date column in the CSV files (default ``'Date'``).
    """

    def __init__(self, directory: str | Path, date_column: str = "Date") -> None:
        self.directory = Path(directory)
        self.date_column = date_column
        if not self.directory.is_dir():
            raise FactorlensValidationError(
                f"CSV directory does not exist: {self.directory}"
            )

    def _read_closes(self, ticker: str) -> pd.Series:
        path = self.directory / f"{ticker}.csv"
        if not path.exists():
            raise FactorlensValidationError(f"CSV file not found: {path}")
        raw = pd.read_csv(path)
        raw.columns = raw.columns.str.strip().str.lower().str.replace(" ", "_")
        date_col = self.date_column.strip().lower().replace(" ", "_")
        if date_col not in raw.columns:
            raise FactorlensValidationError(
                f"{path.name} has no {self.date_column!r} column."
            )
        if "adj_close" in raw.columns:
            value_col = "adj_close"
        elif "close" in raw.columns:
            value_col = "close"
        else:
            raise FactorlensValidationError(
                f"{path.name} has neither a 'Close' nor an 'Adj Close' column."
            )
        closes = pd.Series(
            pd.to_numeric(raw[value_col], errors="coerce").to_numpy(),
            index=pd.DatetimeIndex(pd.to_datetime(raw[date_col]), name="date"),
            name=ticker,
        )
        closes = closes[~closes.index.duplicated(keep="last")]
        return closes.sort_index()

    def fetch_closes(
        self,
        tickers: Sequence[str],
        start: str | pd.Timestamp,
        end: str | pd.Timestamp,
    ) -> pd.DataFrame:
        tickers = normalize_tickers(tickers)
        if not tickers:
            raise FactorlensValidationError("tickers must be a non-empty sequence.")
        start_ts = pd.Timestamp(start)
        end_ts = pd.Timestamp(end)
        columns = {}
        for ticker in tickers:
            closes = self._read_closes(ticker)
            columns[ticker] = closes[(closes.index >= start_ts) & (closes.index <= end_ts)]
        wide = pd.concat(columns, axis=1).sort_index()
        wide.index.name = "date"
        return wide
