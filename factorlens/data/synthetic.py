"""Synthetic close prices for demos and tests.

Prices follow geometric Brownian motion.  Every non-factor ticker is built
as a noisy linear mix of the factor tickers' log returns so that an
exposure analysis on it has something to find.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from factorlens.data.base import PriceProvider, normalize_tickers


def generate_synthetic_closes(
    tickers: Sequence[str],
    start: str | pd.Timestamp = "2021-01-04",
    end: str | pd.Timestamp = "2023-12-29",
    seed: int = 42,
) -> pd.DataFrame:
    """Generate deterministic daily closes for *tickers*.

    Parameters
    ----------
    tickers : sequence of str
        Ticker symbols.
    start, end : str or Timestamp
        Date range boundaries (business days).
    seed : int
        Random seed for reproducibility.

    Returns
    -------
    DataFrame
        Wide closes, date index, one column per ticker.
    """
    rng = np.random.default_rng(seed)
    dates = pd.bdate_range(start=start, end=end, name="date")
    n_days = len(dates)
    columns: dict[str, np.ndarray] = {}
    for ticker in normalize_tickers(tickers):
        annual_drift = rng.uniform(0.02, 0.12)
        annual_vol = rng.uniform(0.15, 0.45)
        log_returns = rng.normal(annual_drift / 252, annual_vol / np.sqrt(252), n_days)
        columns[ticker] = 100.0 * np.exp(np.cumsum(log_returns))
    return pd.DataFrame(columns, index=dates)


class SyntheticProvider(PriceProvider):
    """Serve :func:`generate_synthetic_closes` through the provider interface.

    Parameters
    ----------
    factor_tickers : sequence of str
        Tickers generated independently.  Any other requested ticker is a
        random mix of these plus idiosyncratic noise.
    seed : int
        Random seed.
    """

    def __init__(self, factor_tickers: Sequence[str] = (), seed: int = 42) -> None:
        self.factor_tickers = normalize_tickers(factor_tickers)
        self.seed = seed

    def fetch_closes(
        self,
        tickers: Sequence[str],
        start: str | pd.Timestamp,
        end: str | pd.Timestamp,
    ) -> pd.DataFrame:
        tickers = normalize_tickers(tickers)
        base = [t for t in tickers if t in self.factor_tickers] or self.factor_tickers
        closes = generate_synthetic_closes(base, start, end, seed=self.seed)
        if closes.empty or not base:
            return generate_synthetic_closes(tickers, start, end, seed=self.seed)

        log_ret = np.log(closes).diff().fillna(0.0)
        for ticker in tickers:
            if ticker in closes.columns:
                continue
            rng = np.random.default_rng([self.seed, sum(map(ord, ticker))])
            loadings = rng.uniform(-0.2, 1.4, len(base))
            noise = rng.normal(0, 0.008, len(log_ret))
            mixed = log_ret[base].to_numpy() @ loadings + noise
            closes[ticker] = 100.0 * np.exp(np.cumsum(mixed))
        return closes[tickers]
