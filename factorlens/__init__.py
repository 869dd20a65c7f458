"""factorlens: multi-factor exposure analysis for equity return series."""

from factorlens.report import ExposureReport, FactorExposure, analyze_factor_exposure
from factorlens.risk import RegressionResult, ols_regression
from factorlens.utils import (
    AlignedSample,
    align_returns,
    FactorlensError,
    FactorlensValidationError,
    DimensionMismatchError,
    InsufficientDataError,
    SingularMatrixError,
)

__version__ = "0.1.0"

__all__ = [
    "ExposureReport", "FactorExposure", "analyze_factor_exposure",
    "RegressionResult", "ols_regression",
    "AlignedSample", "align_returns",
    "FactorlensError", "FactorlensValidationError",
    "DimensionMismatchError", "InsufficientDataError", "SingularMatrixError",
]
