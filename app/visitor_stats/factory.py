"""
Factory for creating visitor stats module.
"""
from datetime import tzinfo
from typing import Optional

from app.visit_tracking.record_store import VisitRecordStore
from .services import VisitorStatsService
from .routes import create_visitor_stats_blueprint


def create_visitor_stats_module(
    record_store: VisitRecordStore,
    tz: Optional[tzinfo] = None,
    default_period: str = "overall"
) -> dict:
    """Create visitor stats module with service and routes.
    
    Args:
        record_store: Store holding the raw visit records
        tz: Timezone for calendar buckets (server local time when None)
        default_period: Period used when a request names none
    
    Returns:
        Dictionary containing the service and blueprint
    """
    visitor_stats_service = VisitorStatsService(
        record_store,
        tz=tz,
        default_period=default_period
    )
    
    blueprint = create_visitor_stats_blueprint(visitor_stats_service)
    
    return {
        "service": visitor_stats_service,
        "blueprint": blueprint
    }
