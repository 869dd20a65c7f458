"""Utility helpers: date alignment and validation."""

from factorlens.utils.alignment import AlignedSample, align_returns
from factorlens.utils.validation import (
    FactorlensError,
    FactorlensValidationError,
    DimensionMismatchError,
    InsufficientDataError,
    SingularMatrixError,
    validate_matrix,
    validate_vector,
    as_return_series,
)

__all__ = [
    "AlignedSample", "align_returns",
    "FactorlensError", "FactorlensValidationError",
    "DimensionMismatchError", "InsufficientDataError", "SingularMatrixError",
    "validate_matrix", "validate_vector", "as_return_series",
]
