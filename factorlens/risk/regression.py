"""Factor regression analysis.

Regresses a target return series on one or more factor return series by
ordinary least squares through the origin: no intercept column is added, so
the target is modelled as a pure linear combination of factor returns.  R²
is computed against the target's mean as usual, which means it can fall
below zero for a poorly chosen factor set.

The normal equations ``beta = (X'X)^-1 X'y`` are solved with the explicit
kernel in :mod:`factorlens.linalg`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from factorlens.linalg import invert, multiply, transpose
from factorlens.utils.alignment import AlignedSample
from factorlens.utils.validation import (
    DimensionMismatchError,
    FactorlensValidationError,
    InsufficientDataError,
    validate_matrix,
    validate_vector,
)


@dataclass(frozen=True)
class RegressionResult:
    """Result of a zero-intercept OLS factor regression.

    Attributes
    ----------
    coefficients : tuple[float, ...]
        One loading per design-matrix column, in column order.
    r_squared : float
        Coefficient of determination.  ``nan`` when the target has zero
        variance; see :attr:`undefined_fit`.
    n_observations : int
        Number of rows used in the fit.
    """

    coefficients: tuple[float, ...]
    r_squared: float
    n_observations: int

    @property
    def undefined_fit(self) -> bool:
        """True when R² is undefined because the target is constant."""
        return math.isnan(self.r_squared)


def design_matrix(sample: AlignedSample) -> np.ndarray:
    """Stack the factor vectors of *sample* into an ``n x k`` matrix.

    Columns follow ``sample.factor_names``.
    """
    n = len(sample.dates)
    if not sample.factor_names:
        return np.empty((n, 0))
    return np.column_stack([sample.factors[name] for name in sample.factor_names])


def r_squared(y: np.ndarray, fitted: np.ndarray) -> float:
    """``1 - SS_res / SS_tot``, or ``nan`` if ``SS_tot`` is exactly zero."""
    ss_tot = float(((y - y.mean()) ** 2).sum())
    if ss_tot == 0:
        return float("nan")
    ss_res = float(((y - fitted) ** 2).sum())
    return 1.0 - ss_res / ss_tot


def ols_regression(y, X) -> RegressionResult:
    """Regress *y* on the columns of *X* without an intercept.

    Parameters
    ----------
    y : array-like
        Target returns, length *n*.
    X : array-like
        Design matrix, ``n x k``, one column per factor.

    Returns
    -------
    RegressionResult

    Raises
    ------
    InsufficientDataError
        If there are no rows, or fewer rows than factors.
    SingularMatrixError
        If ``X'X`` cannot be inverted, typically because two factors are
        linearly dependent over the sample.
    DimensionMismatchError
        If *y* and *X* disagree on the number of rows.
    """
    X = validate_matrix(X, "X")
    y = validate_vector(y, "y")
    n, k = X.shape
    if k == 0:
        raise FactorlensValidationError("X must have at least one factor column.")
    if len(y) != n:
        raise DimensionMismatchError(
            f"y has {len(y)} observation(s) but X has {n} row(s)."
        )
    if n == 0 or n < k:
        raise InsufficientDataError(
            f"{n} aligned observation(s) for {k} factor(s); "
            "need at least as many observations as factors."
        )

    Xt = transpose(X)
    XtX_inv = invert(multiply(Xt, X))
    Xty = multiply(Xt, y.reshape(-1, 1))
    beta = multiply(XtX_inv, Xty)

    fitted = multiply(X, beta)[:, 0]

    return RegressionResult(
        coefficients=tuple(float(b) for b in beta[:, 0]),
        r_squared=r_squared(y, fitted),
        n_observations=n,
    )


def regress_sample(sample: AlignedSample) -> RegressionResult:
    """Run :func:`ols_regression` on an :class:`AlignedSample`."""
    return ols_regression(sample.target, design_matrix(sample))
