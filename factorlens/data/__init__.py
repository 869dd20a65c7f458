"""Close-price providers."""

from factorlens.data.base import PriceProvider, normalize_tickers
from factorlens.data.csv_provider import CsvProvider
from factorlens.data.synthetic import SyntheticProvider, generate_synthetic_closes

__all__ = [
    "PriceProvider",
    "normalize_tickers",
    "CsvProvider",
    "SyntheticProvider",
    "generate_synthetic_closes",
    "YFinanceProvider",
]


def __getattr__(name: str):
    """Lazy-import optional providers so missing deps don't break the package."""
    if name == "YFinanceProvider":
        from factorlens.data.yfinance_provider import YFinanceProvider
        return YFinanceProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
