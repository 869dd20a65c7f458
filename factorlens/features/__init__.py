"""Return series construction from raw close prices."""

from factorlens.features.returns import (
    TimedObservation,
    percent_returns,
    trim_to_period,
    to_observations,
)

__all__ = ["TimedObservation", "percent_returns", "trim_to_period", "to_observations"]
