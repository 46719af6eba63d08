"""
Visitor Stats Service

Runs stats queries against the record store and shapes the results
for the dashboard.
"""

import logging
import time
from datetime import tzinfo
from typing import Callable, Dict, List, Optional, Union

from analytics_service import compute_stats
from analytics_service.models import StatsFilter, StatsPeriod, StatsResult
from analytics_service.periods import BUCKET_UNITS

from app.visit_tracking.record_store import VisitRecordStore
from .models import GroupRow, StatsReport, PERIOD_TITLES, SERIES_TITLES

logger = logging.getLogger(__name__)


def sorted_group(counts: Dict[str, int]) -> List[GroupRow]:
    """Grouping rows by visits descending, then by value."""
    return [
        GroupRow(value=value, visits=visits)
        for value, visits in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    ]


class VisitorStatsService:
    """Service for querying visitor statistics."""

    def __init__(
        self,
        record_store: VisitRecordStore,
        tz: Optional[tzinfo] = None,
        default_period: str = StatsPeriod.OVERALL.value,
        clock: Callable[[], float] = time.time
    ):
        """Initialize the visitor stats service.

        Args:
            record_store: Store holding the raw visit records
            tz: Timezone for calendar buckets (server local time when None)
            default_period: Period used when a query names none
            clock: Source of the current time in epoch seconds
        """
        self.record_store = record_store
        self.tz = tz
        self.default_period = StatsPeriod.parse(default_period)
        self.clock = clock

    def resolve_period(self, period: Union[StatsPeriod, str, None]) -> StatsPeriod:
        """Resolve a requested period; a missing one means the default."""
        if period is None:
            return self.default_period
        return StatsPeriod.parse(period)

    def get_stats(
        self,
        period: Union[StatsPeriod, str, None] = None,
        stats_filter: Optional[StatsFilter] = None,
        now: Optional[float] = None
    ) -> StatsResult:
        """Compute statistics over every stored visit.

        Args:
            period: Period selector (default period when None)
            stats_filter: Optional drill-down filter
            now: Current time override in epoch seconds

        Returns:
            StatsResult for the query
        """
        records = self.record_store.load_all()
        return compute_stats(
            records,
            self.resolve_period(period),
            stats_filter,
            now=self.clock() if now is None else now,
            tz=self.tz
        )

    def build_report(
        self,
        result: StatsResult,
        period: StatsPeriod,
        stats_filter: Optional[StatsFilter] = None
    ) -> StatsReport:
        """Shape a stats result for display.

        Args:
            result: Output of the aggregation engine
            period: Period the result was computed for
            stats_filter: Filter the result was computed with

        Returns:
            StatsReport with chart data and sorted grouping tables
        """
        chart = {
            "labels": list(result.bucket_labels),
            "datasets": [
                {"label": title, "data": list(getattr(result, series))}
                for series, title in SERIES_TITLES
            ]
        }

        groups = {
            "language": sorted_group(result.group_by_language),
            "url": sorted_group(result.group_by_url),
            "browser": sorted_group(result.group_by_browser)
        }

        periods = [
            {"value": p.value, "title": PERIOD_TITLES[p], "active": p is period}
            for p in StatsPeriod
        ]

        return StatsReport(
            period=period.value,
            period_title=PERIOD_TITLES[period],
            bucket_unit=BUCKET_UNITS[period],
            stats=result.to_dict(),
            filter=stats_filter.to_dict() if stats_filter else None,
            chart=chart,
            groups=groups,
            periods=periods
        )

    def get_report(
        self,
        period: Union[StatsPeriod, str, None] = None,
        stats_filter: Optional[StatsFilter] = None,
        now: Optional[float] = None
    ) -> StatsReport:
        """Compute statistics and shape them for display."""
        resolved = self.resolve_period(period)
        result = self.get_stats(resolved, stats_filter, now)
        logger.info(
            "Visitor stats period=%s filter=%s total=%d unique=%d",
            resolved.value,
            stats_filter.to_dict() if stats_filter else None,
            result.total_visits,
            result.unique_visitor_count
        )
        return self.build_report(result, resolved, stats_filter)
