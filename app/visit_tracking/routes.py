"""
Visit Tracking Routes

Flask routes for recording page visits.
"""

import logging

from flask import Blueprint, request, jsonify

from .extractor import extract_visit_record
from .record_store import VisitRecordStore, StoreCorruptedError

logger = logging.getLogger(__name__)


def create_visit_tracking_blueprint(record_store: VisitRecordStore) -> Blueprint:
    """Create a Flask blueprint for visit tracking routes.
    
    Args:
        record_store: Store that receives the captured visits
        
    Returns:
        Flask blueprint with visit tracking routes
    """
    bp = Blueprint('visit_tracking', __name__)
    
    def _store(record):
        try:
            record_store.append(record)
        except StoreCorruptedError as e:
            logger.error("Dropped visit to %s: %s", record.url, e)
            return jsonify({"error": "store-unavailable"}), 503
        logger.debug("Tracked visit to %s from %s", record.url, record.ip)
        return jsonify({"status": "success"})
    
    @bp.route("/track", methods=["POST"])
    def track_visit():
        """Record a visit reported by a page script."""
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "invalid-payload"}), 400
        
        record = extract_visit_record(
            request,
            url=data.get("url"),
            referrer=data.get("referrer")
        )
        return _store(record)
    
    @bp.route("/track", methods=["GET"])
    def track_visit_beacon():
        """Record a visit through a plain GET (image beacon / noscript)."""
        record = extract_visit_record(
            request,
            url=request.args.get("url"),
            referrer=request.args.get("referrer")
        )
        return _store(record)
    
    return bp
