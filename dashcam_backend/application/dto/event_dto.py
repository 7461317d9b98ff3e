from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from .common_dto import CamelModel


class EventReportRequest(CamelModel):
    """
    DTO for a device event report.

    Fields beyond the known ones are kept as event metadata.
    """
    model_config = ConfigDict(extra="allow")

    event_type: Optional[str] = None
    timestamp: Optional[datetime] = None
    severity: Optional[float] = None
    location: Optional[Dict[str, Any]] = None
    event_id: Optional[str] = None


class EventActionResponse(CamelModel):
    type: str
    parameters: Dict[str, Any] = Field(default_factory=dict)


class EventReportResponse(CamelModel):
    """DTO acknowledging an event report"""
    event_id: str
    acknowledged: bool = True
    actions: List[EventActionResponse] = Field(default_factory=list)
    processing_status: str = "queued"


class EventListItemResponse(CamelModel):
    event_id: str
    device_id: str
    event_type: str
    severity: Optional[float] = None
    timestamp: datetime
    received_at: datetime
    location: Optional[Dict[str, Any]] = None
    processed: bool = False
    acknowledged: bool = True
    metadata: Dict[str, Any] = Field(default_factory=dict)


class EventListResponse(CamelModel):
    events: List[EventListItemResponse] = Field(default_factory=list)
    total_events: int = 0
    recent_events: int = 0
