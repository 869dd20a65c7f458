"""Exposure analysis configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from factorlens.utils.validation import FactorlensValidationError


@dataclass(frozen=True)
class AnalysisConfig:
    # Factor name -> proxy ETF
    factor_tickers: dict[str, str] = field(default_factory=lambda: {
        "market": "SPY",
        "size": "IJR",
        "value": "IWD",
        "momentum": "MTUM",
    })

    # Analysis windows, in trading days
    period_trading_days: dict[str, int] = field(default_factory=lambda: {
        "6month": 126,
        "1year": 252,
        "3year": 756,
    })
    default_period: str = "1year"

    # Data
    data_source: str = "yfinance"   # "yfinance", "csv" or "synthetic"
    csv_dir: str = "data"
    calendar_buffer_days: int = 14   # Slack for holidays when converting trading to calendar days
    synthetic_seed: int = 42

    def trading_days(self, period: str) -> int:
        """Trading-day window for *period*; unknown periods are rejected."""
        if period not in self.period_trading_days:
            raise FactorlensValidationError(
                f"Unknown period {period!r}; expected one of "
                f"{sorted(self.period_trading_days)}."
            )
        return self.period_trading_days[period]

    def to_dict(self) -> dict:
        return {k: getattr(self, k) for k in self.__dataclass_fields__}
