"""Error types and input validation helpers.

Every public function in the library calls these at entry points to produce
clear, early error messages rather than cryptic pandas/numpy exceptions
downstream.

Error hierarchy
---------------
All library errors derive from :class:`FactorlensError`.  Bad input (wrong
shape, non-numeric or non-finite values, too few observations) raises a
:class:`FactorlensValidationError`, which is also a :class:`ValueError`.
A design matrix that cannot be inverted raises :class:`SingularMatrixError`.

An undefined R² (constant target series) is *not* an error: it is reported as
``nan`` together with an ``undefined_fit`` flag on the result objects.
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np
import pandas as pd


class FactorlensError(Exception):
    """Base class for all factorlens errors."""


class FactorlensValidationError(FactorlensError, ValueError):
    """Raised when input data violates expected invariants."""


class DimensionMismatchError(FactorlensValidationError):
    """Raised when matrix shapes are incompatible for an operation."""


class InsufficientDataError(FactorlensValidationError):
    """Raised when fewer aligned observations remain than factors."""


class SingularMatrixError(FactorlensError, ArithmeticError):
    """Raised when a matrix is not invertible to the required precision.

    Usually caused by perfectly collinear factors over the sample window.
    """


def validate_matrix(matrix, name: str = "matrix") -> np.ndarray:
    """Return *matrix* as a fresh 2-D float array.

    Raises :class:`FactorlensValidationError` if the input is not numeric,
    not two-dimensional, or contains NaN/inf.
    """
    try:
        arr = np.array(matrix, dtype=float)
    except (TypeError, ValueError) as e:
        raise FactorlensValidationError(
            f"{name} must be a numeric 2-D array: {e}"
        ) from e
    if arr.ndim != 2:
        raise FactorlensValidationError(
            f"{name} must be 2-dimensional; got {arr.ndim} dimension(s)."
        )
    if not np.isfinite(arr).all():
        n_bad = int((~np.isfinite(arr)).sum())
        raise FactorlensValidationError(
            f"{name} contains {n_bad} non-finite value(s)."
        )
    return arr


def validate_vector(vector, name: str = "vector") -> np.ndarray:
    """Return *vector* as a fresh 1-D finite float array."""
    try:
        arr = np.array(vector, dtype=float)
    except (TypeError, ValueError) as e:
        raise FactorlensValidationError(
            f"{name} must be a numeric 1-D array: {e}"
        ) from e
    if arr.ndim != 1:
        raise FactorlensValidationError(
            f"{name} must be 1-dimensional; got {arr.ndim} dimension(s)."
        )
    if not np.isfinite(arr).all():
        n_bad = int((~np.isfinite(arr)).sum())
        raise FactorlensValidationError(
            f"{name} contains {n_bad} non-finite value(s)."
        )
    return arr


def as_return_series(
    data: pd.Series | Iterable[tuple[Any, float]],
    name: str = "series",
) -> pd.Series:
    """Normalise *data* into a float Series indexed by date.

    Parameters
    ----------
    data : Series or iterable of ``(date, value)`` pairs
        A Series is used as-is (its index holds the dates).  Any iterable of
        pairs, including ``TimedObservation`` tuples, is converted with
        order and duplicate dates preserved.
    name : str
        Label used in error messages.

    Returns
    -------
    Series
        Float values in input order.  NaN is allowed.
    """
    if isinstance(data, pd.Series):
        series = data
    elif isinstance(data, (str, bytes, pd.DataFrame)):
        raise FactorlensValidationError(
            f"{name} must be a Series or an iterable of (date, value) pairs; "
            f"got {type(data).__name__}."
        )
    else:
        try:
            pairs = [tuple(p) for p in data]
        except TypeError as e:
            raise FactorlensValidationError(
                f"{name} must be a Series or an iterable of (date, value) pairs; "
                f"got {type(data).__name__}."
            ) from e
        if any(len(p) != 2 for p in pairs):
            raise FactorlensValidationError(
                f"{name} must contain (date, value) pairs."
            )
        series = pd.Series(
            [p[1] for p in pairs],
            index=pd.Index([p[0] for p in pairs], name="date"),
            dtype=object,
        )
    try:
        return series.astype(float)
    except (TypeError, ValueError) as e:
        raise FactorlensValidationError(
            f"{name} values must be numeric: {e}"
        ) from e
