"""Linear algebra kernel: transpose, multiply, Gauss-Jordan inversion."""

from factorlens.linalg.kernel import (
    PIVOT_TOLERANCE,
    identity,
    invert,
    multiply,
    transpose,
)

__all__ = ["PIVOT_TOLERANCE", "identity", "invert", "multiply", "transpose"]
