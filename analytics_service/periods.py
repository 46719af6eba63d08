"""
Period Resolver

Maps a reporting period to its time window: the lower time bound, the
function that turns a timestamp into a bucket key, and the canonical
ordered list of bucket labels (empty buckets included).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, date, timedelta, tzinfo
from typing import Callable, Iterable, List, Optional, Union

from .models import StatsPeriod

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400

# strftime format of the bucket key for each period
BUCKET_FORMATS = {
    StatsPeriod.DAY: "%H:00",
    StatsPeriod.WEEK: "%Y-%m-%d",
    StatsPeriod.MONTH: "%Y-%m-%d",
    StatsPeriod.YEAR: "%Y-%m",
    StatsPeriod.OVERALL: "%Y",
}

# Chart heading granularity for each period
BUCKET_UNITS = {
    StatsPeriod.DAY: "Hour",
    StatsPeriod.WEEK: "Day",
    StatsPeriod.MONTH: "Day",
    StatsPeriod.YEAR: "Month",
    StatsPeriod.OVERALL: "Year",
}


@dataclass(frozen=True)
class PeriodWindow:
    """Resolved time window for one stats query."""

    period: StatsPeriod
    lower_bound: int
    bucket_key: Callable[[int], str]
    bucket_labels: List[str]

    @property
    def bucket_unit(self) -> str:
        """Human-readable bucket granularity."""
        return BUCKET_UNITS[self.period]


def _local_datetime(timestamp: Union[int, float], tz: Optional[tzinfo]) -> datetime:
    """Convert epoch seconds to a datetime in tz (server local time when None)."""
    return datetime.fromtimestamp(timestamp, tz)


def make_bucket_key(period: StatsPeriod, tz: Optional[tzinfo] = None) -> Callable[[int], str]:
    """Build the timestamp -> bucket label function for a period."""
    fmt = BUCKET_FORMATS[period]

    def bucket_key(timestamp: int) -> str:
        return _local_datetime(timestamp, tz).strftime(fmt)

    return bucket_key


def _trailing_days(today: date, count: int) -> List[str]:
    """The `count` calendar days ending with today, oldest first."""
    return [(today - timedelta(days=offset)).isoformat() for offset in range(count - 1, -1, -1)]


def _trailing_months(today: date, count: int) -> List[str]:
    """The `count` calendar months ending with the current one, oldest first."""
    current = today.year * 12 + today.month - 1
    labels = []
    for index in range(current - count + 1, current + 1):
        year, month = divmod(index, 12)
        labels.append(f"{year:04d}-{month + 1:02d}")
    return labels


def _year_range(
    record_timestamps: Iterable[int],
    current_year: int,
    tz: Optional[tzinfo]
) -> List[str]:
    """Every year from the earliest record through the current year."""
    years = [_local_datetime(ts, tz).year for ts in record_timestamps]
    first_year = min(min(years, default=current_year), current_year)
    return [str(year) for year in range(first_year, current_year + 1)]


def resolve_period(
    period: Union[StatsPeriod, str, None],
    now: Union[int, float],
    record_timestamps: Iterable[int] = (),
    tz: Optional[tzinfo] = None
) -> PeriodWindow:
    """Resolve a period selector into its lower bound, bucket key and labels.

    Args:
        period: Period selector; unknown or missing values mean OVERALL
        now: Current time in epoch seconds
        record_timestamps: Timestamps of ALL records, used only by OVERALL
            to find the first year of the timeline
        tz: Timezone for calendar boundaries (server local time when None)

    Returns:
        PeriodWindow for the query
    """
    resolved = StatsPeriod.parse(period)
    if not isinstance(period, StatsPeriod) and not StatsPeriod.is_valid(period):
        logger.debug("Unknown period %r, falling back to %s", period, resolved.value)

    current = _local_datetime(now, tz)
    today = current.date()

    if resolved is StatsPeriod.DAY:
        midnight = current.replace(hour=0, minute=0, second=0, microsecond=0)
        lower_bound = int(midnight.timestamp())
        labels = [f"{hour:02d}:00" for hour in range(24)]
    elif resolved is StatsPeriod.WEEK:
        lower_bound = int(now - 7 * SECONDS_PER_DAY)
        labels = _trailing_days(today, 7)
    elif resolved is StatsPeriod.MONTH:
        lower_bound = int(now - 30 * SECONDS_PER_DAY)
        labels = _trailing_days(today, 30)
    elif resolved is StatsPeriod.YEAR:
        lower_bound = int(now - 365 * SECONDS_PER_DAY)
        labels = _trailing_months(today, 12)
    else:
        lower_bound = 0
        labels = _year_range(record_timestamps, today.year, tz)

    return PeriodWindow(
        period=resolved,
        lower_bound=lower_bound,
        bucket_key=make_bucket_key(resolved, tz),
        bucket_labels=labels
    )
