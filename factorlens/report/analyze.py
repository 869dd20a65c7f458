"""End-to-end factor exposure analysis on in-memory return series."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

from factorlens.report.exposure import ExposureReport, build_exposure_report
from factorlens.risk.regression import regress_sample
from factorlens.utils.alignment import align_returns


def analyze_factor_exposure(
    ticker: str,
    period: str,
    target: pd.Series | Iterable[tuple[Any, float]],
    factors: Mapping[str, pd.Series | Iterable[tuple[Any, float]]],
) -> ExposureReport:
    """Estimate a target's exposures to a set of factors.

    Parameters
    ----------
    ticker, period : str
        Passed through to the report unchanged.
    target : Series or iterable of ``(date, value)`` pairs
        Target percentage returns, ascending by date, seed return first
        (see :func:`factorlens.features.percent_returns`).
    factors : mapping of str to Series or pairs
        Factor percentage returns keyed by factor name.  Exposures are
        reported in this mapping's order.

    Returns
    -------
    ExposureReport

    Raises
    ------
    InsufficientDataError
        Fewer aligned dates than factors.
    SingularMatrixError
        Collinear factors over the aligned window.
    """
    sample = align_returns(target, factors)
    result = regress_sample(sample)
    return build_exposure_report(
        sample.factor_names,
        result.coefficients,
        result.r_squared,
        ticker=ticker,
        period=period,
        n_observations=result.n_observations,
        n_fallbacks=sample.n_fallbacks,
    )
