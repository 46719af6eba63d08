"""
Data Models for Visitor Stats

Defines the display structures assembled from the aggregation result.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from analytics_service.models import StatsPeriod


PERIOD_TITLES = {
    StatsPeriod.DAY: "Today",
    StatsPeriod.WEEK: "Past Week",
    StatsPeriod.MONTH: "Past Month",
    StatsPeriod.YEAR: "Past Year",
    StatsPeriod.OVERALL: "Overall",
}

SERIES_TITLES = [
    ("visits_series", "Visits"),
    ("unique_series", "Unique Visitors"),
    ("recurring_series", "Recurring Visitors"),
]


@dataclass
class GroupRow:
    """One row of a grouping table."""

    value: str
    visits: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"value": self.value, "visits": self.visits}


@dataclass
class StatsReport:
    """Display-ready visitor statistics for the dashboard."""

    period: str
    period_title: str
    bucket_unit: str
    stats: Dict[str, Any]
    filter: Optional[Dict[str, str]] = None
    chart: Dict[str, Any] = field(default_factory=dict)
    groups: Dict[str, List[GroupRow]] = field(default_factory=dict)
    periods: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "period": self.period,
            "period_title": self.period_title,
            "bucket_unit": self.bucket_unit,
            "stats": self.stats,
            "filter": self.filter,
            "chart": self.chart,
            "groups": {
                dimension: [row.to_dict() for row in rows]
                for dimension, rows in self.groups.items()
            },
            "periods": self.periods
        }
