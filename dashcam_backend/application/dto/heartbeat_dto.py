from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common_dto import CamelModel


class HeartbeatRequest(CamelModel):
    """DTO for a device heartbeat"""
    timestamp: Optional[datetime] = None
    location: Optional[Dict[str, Any]] = None
    device_status: Optional[Dict[str, Any]] = None
    performance_metrics: Optional[Dict[str, Any]] = None


class CommandSummaryResponse(CamelModel):
    """Command as delivered to a device"""
    id: str
    type: str
    parameters: Dict[str, Any] = Field(default_factory=dict)


class HeartbeatResponse(CamelModel):
    """DTO for heartbeat response"""
    commands: List[CommandSummaryResponse] = Field(default_factory=list)
    config_update_available: bool = False
    server_time: datetime
