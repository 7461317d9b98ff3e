# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    Represents a dashcam that has authenticated at least once. Online state is
    never stored; it is derived from ``last_seen`` and an online window.
    """
    device_id: str
    registered_at: datetime
    last_seen: datetime
    device_info: Dict[str, Any] = field(default_factory=dict)
    location: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None
    performance_metrics: Optional[Dict[str, Any]] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    last_reported_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.device_id or not self.device_id.strip():
            raise ValueError("Device ID is required")

    def is_online(self, now: datetime, online_window: timedelta) -> bool:
        return now - self.last_seen < online_window
