"""
Statistics data models.

Enums for the period selector and filter dimensions, the filter value
object and the aggregated statistics result.
"""

from enum import Enum
from typing import Dict, List, Optional, Any

from pydantic import BaseModel, ConfigDict, Field

from ..classifier import browser_name, readable_language
from .visit_models import VisitRecord


class InvalidFilterError(ValueError):
    """Raised when a filter names a dimension that does not exist."""


class StatsPeriod(Enum):
    """Reporting windows supported by the aggregation engine."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    OVERALL = "overall"

    @classmethod
    def is_valid(cls, period: str) -> bool:
        """Check if a period string is valid."""
        try:
            cls(period)
            return True
        except ValueError:
            return False

    @classmethod
    def parse(cls, period: Optional[str]) -> "StatsPeriod":
        """Parse a period selector, falling back to OVERALL when unknown."""
        if isinstance(period, cls):
            return period
        if period is None or not cls.is_valid(period):
            return cls.OVERALL
        return cls(period)


class FilterDimension(Enum):
    """Record dimensions a stats query can be narrowed by."""

    LANGUAGE = "language"
    URL = "url"
    BROWSER = "browser"

    @classmethod
    def parse(cls, dimension: str) -> "FilterDimension":
        """Parse a dimension name.

        Raises:
            InvalidFilterError: If the name is not a known dimension
        """
        try:
            return cls(dimension)
        except ValueError:
            allowed = ", ".join(d.value for d in cls)
            raise InvalidFilterError(
                f"Unknown filter dimension '{dimension}' (expected one of: {allowed})"
            ) from None

    def value_of(self, record: VisitRecord) -> str:
        """Derive this dimension's value for a record."""
        if self is FilterDimension.LANGUAGE:
            return readable_language(record.language_header)
        if self is FilterDimension.BROWSER:
            return browser_name(record.user_agent)
        return record.url


class StatsFilter(BaseModel):
    """Drill-down filter: keep only records whose dimension equals value."""

    model_config = ConfigDict(frozen=True)

    dimension: FilterDimension
    value: str

    @classmethod
    def from_params(cls, filter_by: Optional[str], filter_value: Optional[str]) -> Optional["StatsFilter"]:
        """Build a filter from query parameters.

        Both parameters must be present for a filter to apply.

        Raises:
            InvalidFilterError: If filter_by names an unknown dimension
        """
        if filter_by is None or filter_value is None:
            return None
        return cls(dimension=FilterDimension.parse(filter_by), value=filter_value)

    def matches(self, record: VisitRecord) -> bool:
        """Exact, case-sensitive comparison of the derived value."""
        return self.dimension.value_of(record) == self.value

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"filter_by": self.dimension.value, "filter_value": self.value}


class StatsResult(BaseModel):
    """Aggregated visitor statistics for one query."""

    total_visits: int = Field(default=0, description="Number of visits in scope")
    unique_visitor_count: int = Field(default=0, description="Distinct IPs in scope")
    recurring_visitor_count: int = Field(default=0, description="Distinct IPs seen more than once in scope")
    bucket_labels: List[str] = Field(default_factory=list, description="Canonical timeline labels, oldest first")
    visits_series: List[int] = Field(default_factory=list, description="Visits per bucket")
    unique_series: List[int] = Field(default_factory=list, description="Distinct IPs per bucket")
    recurring_series: List[int] = Field(default_factory=list, description="Repeat IPs per bucket")
    group_by_language: Dict[str, int] = Field(default_factory=dict, description="Visits per readable language")
    group_by_url: Dict[str, int] = Field(default_factory=dict, description="Visits per URL")
    group_by_browser: Dict[str, int] = Field(default_factory=dict, description="Visits per browser family")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(mode="json")
