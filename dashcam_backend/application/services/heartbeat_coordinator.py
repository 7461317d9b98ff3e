"""Heartbeat coordinator: the single poll that carries liveness, commands and config hints."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ...domain.models.command import Command
from .device_registry import DeviceRegistry
from .command_queue import CommandQueue
from ...utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandSummary:
    """What a device sees of a command"""
    id: str
    type: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_command(cls, command: Command) -> "CommandSummary":
        return cls(id=command.id, type=command.command_type, parameters=dict(command.parameters))


@dataclass(frozen=True)
class HeartbeatResult:
    commands: List[CommandSummary]
    config_update_available: bool
    server_time: datetime


class HeartbeatCoordinator:
    """
    Handles a device poll.

    The registry is updated before the queue is drained, so a device's own
    liveness update is visible by the time its commands are selected.
    """

    def __init__(self, device_registry: DeviceRegistry, command_queue: CommandQueue) -> None:
        self.device_registry = device_registry
        self.command_queue = command_queue

    async def handle_heartbeat(
        self,
        device_id: str,
        timestamp: Optional[datetime] = None,
        location: Optional[Dict[str, Any]] = None,
        status: Optional[Dict[str, Any]] = None,
        metrics: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> HeartbeatResult:
        now = now or utc_now()

        # Contact time is server receipt time; the device clock is kept as reported_at
        await self.device_registry.touch(
            device_id,
            contact_time=now,
            location=location,
            status=status,
            metrics=metrics,
            ip_address=ip_address,
            reported_at=ensure_utc(timestamp),
        )

        drained = await self.command_queue.drain_pending(device_id, now=now)
        logger.debug(f"Heartbeat received from device: {device_id} ({len(drained)} command(s))")

        return HeartbeatResult(
            commands=[CommandSummary.from_command(command) for command in drained],
            # Reserved for push-on-change; devices re-read config on their own schedule
            config_update_available=False,
            server_time=now,
        )
