"""
Models package for visit analytics data.

This package contains the Pydantic models and enums shared by the
record store, the aggregation engine and the web layer.
"""

from .visit_models import (
    VisitRecord,
    DIRECT_REFERRER,
    UNKNOWN_HEADER,
    MAX_TIMESTAMP
)

from .stats_models import (
    StatsPeriod,
    FilterDimension,
    StatsFilter,
    StatsResult,
    InvalidFilterError
)

__all__ = [
    # Visit models
    "VisitRecord",
    "DIRECT_REFERRER",
    "UNKNOWN_HEADER",
    "MAX_TIMESTAMP",

    # Stats models
    "StatsPeriod",
    "FilterDimension",
    "StatsFilter",
    "StatsResult",
    "InvalidFilterError",
]
