"""
Aggregation Engine

Computes visitor statistics for a period from a set of visit records:
crawler exclusion, period and drill-down filtering, overall totals,
the gap-filled per-bucket series and the category groupings.
"""

import logging
from collections import Counter, defaultdict
from datetime import tzinfo
from typing import Dict, Iterable, List, Optional, Union

from .classifier import browser_name, is_crawler, readable_language
from .models import StatsFilter, StatsPeriod, StatsResult, VisitRecord
from .periods import PeriodWindow, resolve_period

logger = logging.getLogger(__name__)


def _recurring(ip_counts: Counter) -> int:
    """Number of IPs seen more than once."""
    return sum(1 for count in ip_counts.values() if count > 1)


def select_records(
    records: List[VisitRecord],
    window: PeriodWindow,
    stats_filter: Optional[StatsFilter] = None
) -> List[VisitRecord]:
    """Select the human visits that fall inside the window and match the filter.

    A record is in the window when it is not older than the lower bound
    and its bucket key is one of the canonical labels, so every selected
    record lands in exactly one bucket.
    """
    labels = set(window.bucket_labels)
    selected = []
    for record in records:
        if is_crawler(record.user_agent):
            continue
        if record.timestamp < window.lower_bound:
            continue
        if window.bucket_key(record.timestamp) not in labels:
            continue
        if stats_filter is not None and not stats_filter.matches(record):
            continue
        selected.append(record)
    return selected


def bucket_series(records: List[VisitRecord], window: PeriodWindow) -> Dict[str, List[int]]:
    """Per-bucket visits, unique and recurring counts, aligned with the labels.

    Records are grouped by bucket key in one pass; recurrence is counted
    within each bucket on its own.
    """
    buckets: Dict[str, Counter] = defaultdict(Counter)
    for record in records:
        buckets[window.bucket_key(record.timestamp)][record.ip] += 1

    visits, unique, recurring = [], [], []
    for label in window.bucket_labels:
        ip_counts = buckets.get(label, Counter())
        visits.append(sum(ip_counts.values()))
        unique.append(len(ip_counts))
        recurring.append(_recurring(ip_counts))

    return {"visits": visits, "unique": unique, "recurring": recurring}


def compute_stats(
    records: Iterable[VisitRecord],
    period: Union[StatsPeriod, str, None],
    stats_filter: Optional[StatsFilter] = None,
    *,
    now: Union[int, float],
    tz: Optional[tzinfo] = None
) -> StatsResult:
    """Compute visitor statistics for a period.

    Args:
        records: All stored visit records, crawlers included
        period: Period selector; unknown values fall back to overall
        stats_filter: Optional drill-down filter
        now: Current time in epoch seconds
        tz: Timezone for calendar buckets (server local time when None)

    Returns:
        StatsResult with totals, gap-filled series and groupings
    """
    records = list(records)
    window = resolve_period(
        period,
        now,
        record_timestamps=(record.timestamp for record in records),
        tz=tz
    )

    selected = select_records(records, window, stats_filter)
    logger.debug(
        "Stats for period=%s filter=%s: %d of %d records in scope",
        window.period.value,
        stats_filter.to_dict() if stats_filter else None,
        len(selected),
        len(records)
    )

    ip_counts = Counter(record.ip for record in selected)
    series = bucket_series(selected, window)

    group_by_language: Dict[str, int] = {}
    group_by_url: Dict[str, int] = {}
    group_by_browser: Dict[str, int] = {}
    for record in selected:
        language = readable_language(record.language_header)
        group_by_language[language] = group_by_language.get(language, 0) + 1
        group_by_url[record.url] = group_by_url.get(record.url, 0) + 1
        browser = browser_name(record.user_agent)
        group_by_browser[browser] = group_by_browser.get(browser, 0) + 1

    return StatsResult(
        total_visits=len(selected),
        unique_visitor_count=len(ip_counts),
        recurring_visitor_count=_recurring(ip_counts),
        bucket_labels=list(window.bucket_labels),
        visits_series=series["visits"],
        unique_series=series["unique"],
        recurring_series=series["recurring"],
        group_by_language=group_by_language,
        group_by_url=group_by_url,
        group_by_browser=group_by_browser
    )
