"""
Visit-related data models.

This module contains Pydantic models for raw visit records as captured
by the tracking endpoint and persisted by the record store.
"""

from pydantic import BaseModel, ConfigDict, Field


DIRECT_REFERRER = "Direct"
UNKNOWN_HEADER = "unknown"

# 2100-01-01T00:00:00Z; keeps every timestamp convertible in any UTC offset
MAX_TIMESTAMP = 4102444800


class VisitRecord(BaseModel):
    """A single page visit. Write-once, read-many."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(ge=0, le=MAX_TIMESTAMP, description="Time of visit in seconds since epoch")
    ip: str = Field(description="Client address, used as the visitor identity")
    user_agent: str = Field(default=UNKNOWN_HEADER, description="Raw User-Agent header")
    url: str = Field(default="", description="Requested path")
    referrer: str = Field(default=DIRECT_REFERRER, description="Raw Referer header or 'Direct'")
    language_header: str = Field(default=UNKNOWN_HEADER, description="Raw Accept-Language header")
