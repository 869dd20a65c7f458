"""Date alignment of a target return series against factor return series.

The regression needs parallel vectors indexed by a common date sequence.
Alignment is by date *presence*, not position, so factor series may arrive
in any order.  Output order follows the target series.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from factorlens.utils.validation import FactorlensValidationError, as_return_series

FALLBACK_VALUE = 0.0


@dataclass(frozen=True)
class AlignedSample:
    """Target and factor returns on a common date sequence.

    Attributes
    ----------
    dates : Index
        Retained dates, in target order, after the seed date is dropped.
    target : ndarray
        Target returns, one per date.
    factors : dict[str, ndarray]
        Factor returns keyed by factor name, one per date.
    factor_names : tuple[str, ...]
        Factor names in the order they were supplied.
    n_fallbacks : int
        Number of looked-up values that were missing or NaN and were
        replaced by ``0.0``.
    """

    dates: pd.Index
    target: np.ndarray
    factors: dict[str, np.ndarray]
    factor_names: tuple[str, ...]
    n_fallbacks: int = 0

    def __len__(self) -> int:
        return len(self.dates)


def _lookup(series: pd.Series, dates: pd.Index) -> tuple[np.ndarray, int]:
    """Values of *series* at *dates*; missing entries fall back to 0.0."""
    unique = series[~series.index.duplicated(keep="last")]
    values = unique.reindex(dates)
    missing = values.isna()
    arr = values.fillna(FALLBACK_VALUE).to_numpy(dtype=float)
    arr.setflags(write=False)
    return arr, int(missing.sum())


def align_returns(
    target: pd.Series | Iterable[tuple[Any, float]],
    factors: Mapping[str, pd.Series | Iterable[tuple[Any, float]]],
) -> AlignedSample:
    """Intersect a target return series with every factor series on date.

    Parameters
    ----------
    target : Series or iterable of ``(date, value)`` pairs
        Target returns in ascending date order.  Its first observation is
        assumed to be the synthetic zero-return seed.
    factors : mapping of str to Series or pairs
        Factor returns keyed by factor name.  At least one is required.

    Returns
    -------
    AlignedSample
        Only dates present in the target *and* in every factor are kept,
        then the first of those is dropped.  Values that are missing or NaN
        after the filter become ``0.0`` and are counted in ``n_fallbacks``.
    """
    if not factors:
        raise FactorlensValidationError("At least one factor series is required.")

    target_s = as_return_series(target, "target")
    factor_s = {
        name: as_return_series(series, f"factor {name!r}")
        for name, series in factors.items()
    }

    dates = target_s.index
    mask = np.ones(len(dates), dtype=bool)
    for series in factor_s.values():
        mask &= dates.isin(series.index)
    # First common date carries the seed return, not a real observation.
    common = dates[mask][1:]

    target_values, n_fallbacks = _lookup(target_s, common)
    factor_values: dict[str, np.ndarray] = {}
    for name, series in factor_s.items():
        factor_values[name], n_missing = _lookup(series, common)
        n_fallbacks += n_missing

    if n_fallbacks:
        warnings.warn(
            f"Data quality: {n_fallbacks} aligned return value(s) were "
            f"missing and replaced with {FALLBACK_VALUE}."
        )

    return AlignedSample(
        dates=common,
        target=target_values,
        factors=factor_values,
        factor_names=tuple(factor_s),
        n_fallbacks=n_fallbacks,
    )
