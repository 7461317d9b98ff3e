from datetime import datetime
from typing import Any, Dict, Optional

from .common_dto import CamelModel


class ConfigUpdateRequest(CamelModel):
    """DTO for configuration merge request"""
    device_config: Optional[Dict[str, Any]] = None


class DeviceConfigResponse(CamelModel):
    """DTO for configuration fetch response"""
    device_config: Dict[str, Any]
    config_version: int
    last_updated: datetime
    server_time: datetime


class ConfigUpdateResponse(CamelModel):
    """DTO for configuration merge response"""
    config_version: int
    last_updated: datetime
