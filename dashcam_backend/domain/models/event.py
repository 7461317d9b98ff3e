from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Any, Dict


@dataclass
class Event:
    """Domain model for a telemetry or safety event reported by a device"""

    id: str
    device_id: str
    event_type: str
    timestamp: datetime
    received_at: datetime

    severity: Optional[float] = None
    location: Optional[Dict[str, Any]] = None
    ip_address: Optional[str] = None

    processed: bool = False
    acknowledged: bool = True

    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EventAction:
    """Follow-up action derived from an event"""

    type: str
    parameters: Dict[str, Any] = field(default_factory=dict)
