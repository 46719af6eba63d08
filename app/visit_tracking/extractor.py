"""
Request Context Extractor

Derives a raw visit record from an inbound Flask request.
"""

import time
from typing import Optional

from flask import Request

from analytics_service.models import VisitRecord, DIRECT_REFERRER, UNKNOWN_HEADER


def get_client_ip(req: Request) -> str:
    """Get client IP address, handling proxy headers."""
    if req.headers.get('X-Forwarded-For'):
        return req.headers.get('X-Forwarded-For').split(',')[0].strip()
    elif req.headers.get('X-Real-IP'):
        return req.headers.get('X-Real-IP')
    else:
        return req.remote_addr or ""


def extract_visit_record(
    req: Request,
    url: Optional[str] = None,
    referrer: Optional[str] = None,
    now: Optional[int] = None
) -> VisitRecord:
    """Build a VisitRecord for the current request.

    Args:
        req: The inbound request
        url: Visited URL reported by the page; defaults to the request path
        referrer: Referrer reported by the page; defaults to the Referer header
        now: Visit time in epoch seconds; defaults to the current time

    Returns:
        VisitRecord describing the visit
    """
    return VisitRecord(
        timestamp=int(time.time()) if now is None else int(now),
        ip=get_client_ip(req),
        user_agent=req.headers.get('User-Agent') or UNKNOWN_HEADER,
        url=url or req.full_path.rstrip('?'),
        referrer=referrer or req.headers.get('Referer') or DIRECT_REFERRER,
        language_header=req.headers.get('Accept-Language') or UNKNOWN_HEADER
    )
