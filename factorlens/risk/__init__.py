"""Factor regression."""

from factorlens.risk.regression import (
    RegressionResult,
    design_matrix,
    ols_regression,
    r_squared,
    regress_sample,
)

__all__ = [
    "RegressionResult", "design_matrix", "ols_regression",
    "r_squared", "regress_sample",
]
