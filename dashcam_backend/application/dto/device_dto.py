from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common_dto import CamelModel


class DeviceResponse(CamelModel):
    """DTO for a device as reported to the dashboard"""
    device_id: str
    device_info: Dict[str, Any] = Field(default_factory=dict)
    registration_date: datetime
    last_seen: datetime
    last_reported_at: Optional[datetime] = None
    location: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None
    performance_metrics: Optional[Dict[str, Any]] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    is_online: bool


class DeviceListResponse(CamelModel):
    devices: List[DeviceResponse] = Field(default_factory=list)
    total_devices: int = 0
    online_devices: int = 0
