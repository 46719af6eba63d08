"""
Visitor Stats Routes

Flask routes for the visitor stats subsystem.
"""

import logging
from typing import Optional, Tuple

from flask import Blueprint, request, jsonify, render_template

from analytics_service.models import InvalidFilterError, StatsFilter
from .services import VisitorStatsService

logger = logging.getLogger(__name__)


def _filter_from_request() -> Optional[StatsFilter]:
    """Read the drill-down filter from the query string."""
    return StatsFilter.from_params(
        request.args.get('filter_by'),
        request.args.get('filter_value')
    )


def _invalid_filter(exc: InvalidFilterError) -> Tuple:
    """JSON error response for an unknown filter dimension."""
    logger.warning("Rejected stats query: %s", exc)
    return jsonify({'error': str(exc)}), 400


def create_visitor_stats_blueprint(visitor_stats_service: VisitorStatsService) -> Blueprint:
    """Create visitor stats blueprint with routes.
    
    Args:
        visitor_stats_service: The visitor stats service instance
        
    Returns:
        Flask blueprint with visitor stats routes
    """
    blueprint = Blueprint('visitor_stats', __name__, url_prefix='/stats')
    
    @blueprint.route('/', methods=['GET'])
    def stats_dashboard():
        """Main stats dashboard page."""
        try:
            stats_filter = _filter_from_request()
        except InvalidFilterError as exc:
            return _invalid_filter(exc)
        
        report = visitor_stats_service.get_report(request.args.get('period'), stats_filter)
        
        return render_template('stats-dashboard.html', report=report)
    
    @blueprint.route('/api/stats', methods=['GET'])
    def api_stats():
        """API endpoint for visitor statistics."""
        try:
            stats_filter = _filter_from_request()
        except InvalidFilterError as exc:
            return _invalid_filter(exc)
        
        period = visitor_stats_service.resolve_period(request.args.get('period'))
        stats = visitor_stats_service.get_stats(period, stats_filter)
        
        return jsonify({
            'period': period.value,
            'filter': stats_filter.to_dict() if stats_filter else None,
            'stats': stats.to_dict()
        })
    
    @blueprint.route('/api/report', methods=['GET'])
    def api_report():
        """API endpoint for the display-ready report (chart and tables)."""
        try:
            stats_filter = _filter_from_request()
        except InvalidFilterError as exc:
            return _invalid_filter(exc)
        
        report = visitor_stats_service.get_report(request.args.get('period'), stats_filter)
        
        return jsonify(report.to_dict())
    
    return blueprint
