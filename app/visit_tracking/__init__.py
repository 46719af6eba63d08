"""
Visit Tracking Subsystem

Captures page visits from inbound requests and persists them as raw records.
"""

from .record_store import VisitRecordStore, StoreCorruptedError
from .extractor import extract_visit_record, get_client_ip
from .factory import create_visit_tracking_module

__all__ = ['VisitRecordStore', 'StoreCorruptedError', 'extract_visit_record', 'get_client_ip', 'create_visit_tracking_module']
