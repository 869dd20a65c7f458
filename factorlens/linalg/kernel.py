"""Dense linear algebra primitives used by the OLS estimator.

All functions are pure: inputs are copied into fresh float arrays and
never modified.

Inversion is Gauss-Jordan elimination with partial pivoting and a fixed
singularity threshold, :data:`PIVOT_TOLERANCE`, independent of the LAPACK
build.  Collinear factors raise :class:`SingularMatrixError`.
"""

from __future__ import annotations

import numpy as np

from factorlens.utils.validation import (
    DimensionMismatchError,
    SingularMatrixError,
    validate_matrix,
)

PIVOT_TOLERANCE = 1e-10


def transpose(matrix) -> np.ndarray:
    """Return the transpose of a 2-D matrix as a new array."""
    return validate_matrix(matrix, "matrix").T.copy()


def multiply(a, b) -> np.ndarray:
    """Matrix product ``a @ b``.

    Raises
    ------
    DimensionMismatchError
        If ``a`` has a different number of columns than ``b`` has rows.
    """
    a = validate_matrix(a, "a")
    b = validate_matrix(b, "b")
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatchError(
            f"Cannot multiply a {a.shape[0]}x{a.shape[1]} matrix by a "
            f"{b.shape[0]}x{b.shape[1]} matrix: inner dimensions differ."
        )
    return a @ b


def identity(n: int) -> np.ndarray:
    return np.eye(n, dtype=float)


def invert(matrix) -> np.ndarray:
    """Invert a square matrix by Gauss-Jordan elimination.

    The augmented matrix ``[M | I]`` is reduced column by column.  For each
    column *i* the row at or below *i* with the largest absolute entry is
    swapped into place (the first such row on ties).  The pivot row is then
    scaled to a unit pivot and column *i* is eliminated from every other
    row.  The right half of the reduced matrix is the inverse.

    Parameters
    ----------
    matrix : array-like
        Square, finite 2-D matrix.

    Returns
    -------
    ndarray
        The inverse, as a new array.

    Raises
    ------
    DimensionMismatchError
        If *matrix* is not square.
    SingularMatrixError
        If a pivot's magnitude falls below :data:`PIVOT_TOLERANCE`.
    """
    m = validate_matrix(matrix, "matrix")
    n, cols = m.shape
    if n != cols:
        raise DimensionMismatchError(
            f"Only square matrices can be inverted; got {n}x{cols}."
        )

    aug = np.hstack([m, identity(n)])
    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]

        pivot = aug[i, i]
        if abs(pivot) < PIVOT_TOLERANCE:
            raise SingularMatrixError(
                f"Matrix is singular and cannot be inverted "
                f"(pivot {pivot:.3e} in column {i} is below {PIVOT_TOLERANCE:g})."
            )

        aug[i] /= pivot
        for k in range(n):
            if k != i:
                aug[k] -= aug[k, i] * aug[i]

    return aug[:, n:].copy()
