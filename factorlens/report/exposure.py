"""Exposure reports: labelled factor loadings plus a plain-English summary."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from factorlens.utils.validation import FactorlensValidationError

HIGH_EXPOSURE = 0.5
LOW_EXPOSURE = 0.3


@dataclass(frozen=True)
class FactorExposure:
    factor: str
    exposure: float


@dataclass(frozen=True)
class ExposureReport:
    """Everything a rendering layer needs to show one analysis.

    Attributes
    ----------
    ticker, period : str
        Opaque identifiers passed through from the caller.
    exposures : tuple[FactorExposure, ...]
        One entry per factor, in the order the factors were supplied.
        Values keep full floating-point precision.
    interpretation : str
        Narrative produced by :func:`generate_interpretation`.
    r_squared : float
        ``nan`` when undefined.
    n_observations : int
        Aligned observations used in the fit.
    n_fallbacks : int
        Aligned values that were missing and replaced by ``0.0``.
    """

    ticker: str
    period: str
    exposures: tuple[FactorExposure, ...]
    interpretation: str
    r_squared: float
    n_observations: int = 0
    n_fallbacks: int = 0

    @property
    def undefined_fit(self) -> bool:
        return math.isnan(self.r_squared)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation; an undefined R² becomes ``None``."""
        return {
            "ticker": self.ticker,
            "period": self.period,
            "exposures": [
                {"factor": e.factor, "exposure": e.exposure} for e in self.exposures
            ],
            "interpretation": self.interpretation,
            "r_squared": None if self.undefined_fit else self.r_squared,
            "undefined_fit": self.undefined_fit,
            "n_observations": self.n_observations,
            "n_fallbacks": self.n_fallbacks,
        }


def factor_label(name: str) -> str:
    """Display label: first character upper-cased, the rest untouched."""
    return name[:1].upper() + name[1:]


def generate_interpretation(
    exposures: Sequence[FactorExposure],
    r_squared: float,
) -> str:
    """Describe the dominant and negligible exposures in one sentence.

    Factors with ``|exposure| > 0.5`` are called out as high exposure and
    those with ``|exposure| <= 0.3`` as low exposure, each group ordered by
    magnitude (largest first).  Factors in between are not mentioned.
    """
    ranked = sorted(exposures, key=lambda e: abs(e.exposure), reverse=True)
    high = [e.factor for e in ranked if abs(e.exposure) > HIGH_EXPOSURE]
    low = [e.factor for e in ranked if abs(e.exposure) <= LOW_EXPOSURE]

    text = "This stock "
    if high:
        plural = "s" if len(high) > 1 else ""
        text += f"has high exposure to {' and '.join(high)} factor{plural}"
    else:
        text += "has moderate exposure across factors"

    if low:
        text += f", and low exposure to {' and '.join(low)}"

    if math.isnan(r_squared):
        text += (
            ". The model's explanatory power is undefined because the "
            "stock's returns have zero variance."
        )
    else:
        text += f". The model explains {r_squared * 100:.1f}% of the stock's variance."
    return text


def build_exposure_report(
    factor_names: Sequence[str],
    coefficients: Sequence[float],
    r_squared: float,
    ticker: str = "",
    period: str = "",
    n_observations: int = 0,
    n_fallbacks: int = 0,
) -> ExposureReport:
    """Label *coefficients* by factor and attach the narrative.

    *factor_names* must be in design-matrix column order.
    """
    if len(factor_names) != len(coefficients):
        raise FactorlensValidationError(
            f"{len(factor_names)} factor name(s) but "
            f"{len(coefficients)} coefficient(s)."
        )
    exposures = tuple(
        FactorExposure(factor=factor_label(name), exposure=float(coef))
        for name, coef in zip(factor_names, coefficients)
    )
    return ExposureReport(
        ticker=ticker,
        period=period,
        exposures=exposures,
        interpretation=generate_interpretation(exposures, r_squared),
        r_squared=float(r_squared),
        n_observations=n_observations,
        n_fallbacks=n_fallbacks,
    )
