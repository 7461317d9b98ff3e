# Standard library imports
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Optional


class CommandStatus(str, Enum):
    """Command lifecycle states."""
    PENDING = "pending"  # Queued, waiting for the device's next heartbeat
    SENT = "sent"  # Delivered in a heartbeat response
    COMPLETED = "completed"
    FAILED = "failed"
    EXPIRED = "expired"  # Timeout elapsed before a result came back

    @property
    def is_terminal(self) -> bool:
        return self in (CommandStatus.COMPLETED, CommandStatus.FAILED, CommandStatus.EXPIRED)


class CommandPriority(str, Enum):
    """Delivery priority; drained high first."""
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    CommandPriority.HIGH: 0,
    CommandPriority.NORMAL: 1,
    CommandPriority.LOW: 2,
}


@dataclass
class Command:
    """
    Domain model for a command addressed to one device.

    ``sequence`` is assigned by the repository at creation and orders commands
    of equal priority first-in first-out.
    """
    id: str
    device_id: str
    command_type: str
    parameters: Dict[str, Any]
    priority: CommandPriority
    timeout_seconds: int
    created_at: datetime
    status: CommandStatus = CommandStatus.PENDING
    sequence: int = 0
    created_by: Optional[str] = None
    sent_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    result: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.device_id:
            raise ValueError("Target device ID is required")
        if self.timeout_seconds <= 0:
            raise ValueError("Command timeout must be positive")

    @property
    def delivery_order(self) -> tuple:
        return (self.priority.rank, self.sequence)

    def deadline(self) -> datetime:
        """Instant after which a pending or sent command counts as expired."""
        started = self.sent_at or self.created_at
        return started + timedelta(seconds=self.timeout_seconds)

    def is_overdue(self, now: datetime) -> bool:
        return not self.status.is_terminal and now >= self.deadline()
