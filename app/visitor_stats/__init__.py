"""
Visitor Stats Module

Provides time-bucketed visitor statistics with drill-down filters.
"""

from .factory import create_visitor_stats_module

__all__ = ["create_visitor_stats_module"]
