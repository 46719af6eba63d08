# Analytics service package: visit classification and statistics aggregation

from .classifier import (
    readable_language,
    browser_name,
    is_crawler,
)
from .periods import (
    PeriodWindow,
    resolve_period,
    make_bucket_key,
)
from .engine import (
    compute_stats,
    select_records,
    bucket_series,
)
from .models import (
    VisitRecord,
    StatsPeriod,
    FilterDimension,
    StatsFilter,
    StatsResult,
    InvalidFilterError,
)
from .logging_config import (
    setup_logging,
    stop_logging,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "readable_language",
    "browser_name",
    "is_crawler",
    "PeriodWindow",
    "resolve_period",
    "make_bucket_key",
    "compute_stats",
    "select_records",
    "bucket_series",
    "VisitRecord",
    "StatsPeriod",
    "FilterDimension",
    "StatsFilter",
    "StatsResult",
    "InvalidFilterError",
    "setup_logging",
    "stop_logging",
    "ThreadSafeLoggingConfig",
]
