"""Pydantic models for the factorlens GUI API."""
from __future__ import annotations

from pydantic import BaseModel, Field

from factorlens.report import ExposureReport


# ── Response models ────────────────────────────────────────────────────

class FactorExposureOut(BaseModel):
    factor: str
    exposure: float


class ExposureReportOut(BaseModel):
    ticker: str
    period: str
    exposures: list[FactorExposureOut]
    interpretation: str
    r_squared: float | None = Field(None, description="None when the fit is undefined")
    undefined_fit: bool = False
    n_observations: int = Field(0, ge=0)
    n_fallbacks: int = Field(0, ge=0, description="Aligned values replaced by 0.0")

    @classmethod
    def from_report(cls, report: ExposureReport) -> "ExposureReportOut":
        return cls(**report.to_dict())


class FactorInfo(BaseModel):
    name: str
    label: str
    ticker: str


class PeriodInfo(BaseModel):
    name: str
    trading_days: int
