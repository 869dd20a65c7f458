"""Factor exposure analysis routes."""
from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from app.exposure_analyzer import ExposureAnalyzer
from factorlens.utils.validation import FactorlensError

from ..models import ExposureReportOut
from ..services.analyzer import get_analyzer

router = APIRouter(prefix="/api/analysis", tags=["analysis"])
_executor = ThreadPoolExecutor(max_workers=4)


@router.get("/{ticker}", response_model=ExposureReportOut)
async def analyze_ticker(
    ticker: str,
    period: str | None = None,
    end_date: date | None = None,
    analyzer: ExposureAnalyzer = Depends(get_analyzer),
) -> ExposureReportOut:
    loop = asyncio.get_running_loop()
    try:
        report = await loop.run_in_executor(
            _executor, analyzer.run, ticker, period, end_date
        )
    except FactorlensError as e:
        raise HTTPException(422, str(e))
    return ExposureReportOut.from_report(report)
