"""Fetch prices for a ticker and its factor proxies, then analyse exposures."""
from __future__ import annotations

import logging
import math

import pandas as pd

from factorlens.data import CsvProvider, PriceProvider, SyntheticProvider
from factorlens.features import percent_returns, trim_to_period
from factorlens.report import ExposureReport, analyze_factor_exposure
from factorlens.utils.validation import FactorlensValidationError

from .config import AnalysisConfig

logger = logging.getLogger(__name__)


def make_provider(config: AnalysisConfig) -> PriceProvider:
    """Build the price provider named by ``config.data_source``."""
    if config.data_source == "yfinance":
        from factorlens.data import YFinanceProvider
        return YFinanceProvider()
    if config.data_source == "csv":
        return CsvProvider(config.csv_dir)
    if config.data_source == "synthetic":
        return SyntheticProvider(
            factor_tickers=list(config.factor_tickers.values()),
            seed=config.synthetic_seed,
        )
    raise FactorlensValidationError(f"Unknown data source: {config.data_source!r}")


class ExposureAnalyzer:
    """Factor exposure analysis for single tickers against configured factor ETFs."""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        provider: PriceProvider | None = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.provider = provider or make_provider(self.config)

    def _date_range(
        self, trading_days: int, end: str | pd.Timestamp | None
    ) -> tuple[pd.Timestamp, pd.Timestamp]:
        end_ts = pd.Timestamp(end) if end is not None else pd.Timestamp.today()
        end_ts = end_ts.normalize()
        calendar_days = math.ceil(trading_days * 365 / 252) + self.config.calendar_buffer_days
        return end_ts - pd.Timedelta(days=calendar_days), end_ts

    def fetch_returns(
        self,
        ticker: str,
        period: str,
        end: str | pd.Timestamp | None = None,
    ) -> tuple[pd.Series, dict[str, pd.Series]]:
        """Percentage returns for *ticker* and every configured factor.

        Each series is trimmed to the period's trading-day window before the
        returns are computed, so each starts with its own zero seed.
        """
        ticker = ticker.strip().upper()
        if not ticker:
            raise FactorlensValidationError("ticker must be a non-empty string.")
        trading_days = self.config.trading_days(period)
        start_ts, end_ts = self._date_range(trading_days, end)

        factor_tickers = self.config.factor_tickers
        symbols = [ticker, *factor_tickers.values()]
        logger.info(
            "Fetching %d symbol(s) from %s to %s", len(symbols), start_ts.date(), end_ts.date()
        )
        closes = self.provider.fetch_closes(symbols, start_ts, end_ts)

        def _returns(symbol: str) -> pd.Series:
            if symbol not in closes.columns:
                raise FactorlensValidationError(f"No price data returned for {symbol}.")
            series = closes[symbol].dropna()
            if series.empty:
                raise FactorlensValidationError(f"No price data returned for {symbol}.")
            return percent_returns(trim_to_period(series, trading_days))

        target = _returns(ticker)
        factors = {name: _returns(symbol) for name, symbol in factor_tickers.items()}
        logger.debug(
            "%s: %d target return(s), factor lengths %s",
            ticker, len(target), {k: len(v) for k, v in factors.items()},
        )
        return target, factors

    def run(
        self,
        ticker: str,
        period: str | None = None,
        end: str | pd.Timestamp | None = None,
    ) -> ExposureReport:
        """Fetch data for *ticker* and return its :class:`ExposureReport`."""
        period = period or self.config.default_period
        target, factors = self.fetch_returns(ticker, period, end)
        report = analyze_factor_exposure(ticker.strip().upper(), period, target, factors)
        if report.n_fallbacks:
            logger.warning(
                "%s: %d aligned value(s) fell back to 0.0", report.ticker, report.n_fallbacks
            )
        logger.info(
            "%s (%s): %d observations, R2=%s",
            report.ticker, period, report.n_observations,
            "undefined" if report.undefined_fit else f"{report.r_squared:.4f}",
        )
        return report
