"""Factor set and analysis period routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.exposure_analyzer import ExposureAnalyzer
from factorlens.report import factor_label

from ..models import FactorInfo, PeriodInfo
from ..services.analyzer import get_analyzer

router = APIRouter(prefix="/api", tags=["factors"])


@router.get("/factors", response_model=list[FactorInfo])
async def list_factors(analyzer: ExposureAnalyzer = Depends(get_analyzer)) -> list[FactorInfo]:
    return [
        FactorInfo(name=name, label=factor_label(name), ticker=ticker)
        for name, ticker in analyzer.config.factor_tickers.items()
    ]


@router.get("/periods", response_model=list[PeriodInfo])
async def list_periods(analyzer: ExposureAnalyzer = Depends(get_analyzer)) -> list[PeriodInfo]:
    return [
        PeriodInfo(name=name, trading_days=days)
        for name, days in analyzer.config.period_trading_days.items()
    ]
