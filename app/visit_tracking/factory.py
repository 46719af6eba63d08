"""
Factory for creating visit tracking module.
"""
from pathlib import Path
from .routes import create_visit_tracking_blueprint
from .record_store import VisitRecordStore


def create_visit_tracking_module(store_file: Path) -> dict:
    """Create visit tracking module with store and routes.
    
    Args:
        store_file: JSON file that holds the visit records
    
    Returns:
        Dictionary containing the record store and blueprint
    """
    record_store = VisitRecordStore(store_file)
    
    blueprint = create_visit_tracking_blueprint(record_store)
    
    return {
        "store": record_store,
        "blueprint": blueprint
    }
