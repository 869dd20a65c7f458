"""Exposure reports and the end-to-end analysis entry point."""

from factorlens.report.exposure import (
    HIGH_EXPOSURE,
    LOW_EXPOSURE,
    ExposureReport,
    FactorExposure,
    build_exposure_report,
    factor_label,
    generate_interpretation,
)
from factorlens.report.analyze import analyze_factor_exposure

__all__ = [
    "HIGH_EXPOSURE", "LOW_EXPOSURE",
    "ExposureReport", "FactorExposure",
    "build_exposure_report", "factor_label", "generate_interpretation",
    "analyze_factor_exposure",
]
