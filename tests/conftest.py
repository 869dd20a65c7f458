"""Shared test fixtures for factorlens."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


@pytest.fixture()
def sample_dates() -> pd.DatetimeIndex:
    """120 business days starting 2022-01-03."""
    return pd.bdate_range("2022-01-03", periods=120, freq="B", name="date")


@pytest.fixture()
def factor_returns(sample_dates) -> dict[str, pd.Series]:
    """Four independent factor percentage-return series, seed return first."""
    rng = np.random.default_rng(0)
    out = {}
    for name, vol in [("market", 1.1), ("size", 0.8), ("value", 0.7), ("momentum", 0.9)]:
        values = rng.normal(0.03, vol, len(sample_dates))
        values[0] = 0.0
        out[name] = pd.Series(values, index=sample_dates)
    return out


@pytest.fixture()
def true_loadings() -> dict[str, float]:
    return {"market": 1.2, "size": -0.7, "value": 0.1, "momentum": 0.4}


@pytest.fixture()
def exact_target(factor_returns, true_loadings) -> pd.Series:
    """Target that is an exact linear combination of the factors."""
    return sum(true_loadings[name] * s for name, s in factor_returns.items())


@pytest.fixture()
def noisy_target(exact_target) -> pd.Series:
    rng = np.random.default_rng(7)
    return exact_target + rng.normal(0, 0.5, len(exact_target))
