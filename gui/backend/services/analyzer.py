"""Shared exposure analyzer for the API routes."""
from __future__ import annotations

import os
from functools import lru_cache

from app.config import AnalysisConfig
from app.exposure_analyzer import ExposureAnalyzer


@lru_cache(maxsize=1)
def get_analyzer() -> ExposureAnalyzer:
    """Analyzer built from ``FACTORLENS_DATA_SOURCE`` / ``FACTORLENS_CSV_DIR``.

    Override with ``app.dependency_overrides[get_analyzer]`` in tests.
    """
    defaults = AnalysisConfig()
    config = AnalysisConfig(
        data_source=os.environ.get("FACTORLENS_DATA_SOURCE", defaults.data_source),
        csv_dir=os.environ.get("FACTORLENS_CSV_DIR", defaults.csv_dir),
    )
    return ExposureAnalyzer(config)
