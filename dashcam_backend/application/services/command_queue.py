"""Command queue: lifecycle of commands delivered to devices on heartbeat."""
import logging
import uuid
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, List, Optional

from ...domain.constants.command_constants import (
    ALLOWED_COMMAND_TYPES,
    CUSTOM_COMMAND_NAME_PARAM,
    CommandTypes,
)
from ...domain.models.command import Command, CommandPriority, CommandStatus
from ...domain.repositories.command_repository import CommandRepository
from ...domain.exceptions import InvalidStateError, NotFoundError, ValidationError
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class CommandQueue:
    """
    Holds commands addressed to devices.

    Lifecycle (linear, no cycles)::

        pending --drain--> sent --report--> completed | failed
        pending | sent --timeout--> expired

    The queue never schedules anything itself. Expiry happens when a caller
    invokes :meth:`expire` or :meth:`expire_overdue`.
    """

    def __init__(
        self,
        command_repository: CommandRepository,
        default_timeout_seconds: int = 30,
    ) -> None:
        self.command_repository = command_repository
        self.default_timeout_seconds = default_timeout_seconds

    async def enqueue(
        self,
        device_id: str,
        command_type: str,
        parameters: Optional[Mapping] = None,
        priority: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        created_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Command:
        """
        Queue a command for a device.

        The device does not have to be known yet; the command waits for its
        first heartbeat.

        Raises:
            ValidationError: If the command type, parameters, priority or timeout is malformed
        """
        if not device_id:
            raise ValidationError("Target device ID is required")
        if not command_type:
            raise ValidationError("Command type is required")
        if command_type not in ALLOWED_COMMAND_TYPES:
            raise ValidationError(
                f"Unknown command type '{command_type}'. "
                f"Allowed: {', '.join(sorted(ALLOWED_COMMAND_TYPES))}"
            )
        if parameters is not None and not isinstance(parameters, Mapping):
            raise ValidationError("Command parameters must be an object")
        parameters = dict(parameters or {})
        if command_type == CommandTypes.CUSTOM:
            name = parameters.get(CUSTOM_COMMAND_NAME_PARAM)
            if not isinstance(name, str) or not name.strip():
                raise ValidationError("Custom commands require a name parameter")

        command = Command(
            id=str(uuid.uuid4()),
            device_id=device_id,
            command_type=command_type,
            parameters=parameters,
            priority=_parse_priority(priority),
            timeout_seconds=_parse_timeout(timeout_seconds, self.default_timeout_seconds),
            created_at=now or utc_now(),
            created_by=created_by,
        )
        saved = await self.command_repository.add(command)
        logger.info(
            f"Command queued: {command_type} ({saved.priority.value}) for device {device_id} "
            f"as {saved.id}"
        )
        return saved

    async def drain_pending(self, device_id: str, now: Optional[datetime] = None) -> List[Command]:
        """
        Mark every pending command for the device as sent and return them.

        Ordered high, normal, low; first in first out within a priority.
        A command is handed out by at most one drain.
        """
        drained = await self.command_repository.drain_pending(device_id, now or utc_now())
        if drained:
            logger.info(f"Delivering {len(drained)} command(s) to device {device_id}")
        return drained

    async def status(self, command_id: str) -> Command:
        command = await self.command_repository.find_by_id(command_id)
        if command is None:
            raise NotFoundError("Command not found")
        return command

    async def complete(
        self,
        command_id: str,
        result: Optional[Dict[str, Any]] = None,
        success: bool = True,
        reporter_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Command:
        """
        Record the outcome of a delivered command.

        Raises:
            NotFoundError: If the command is unknown, or the reporter is not its target device
            InvalidStateError: If the command is not currently ``sent``
        """
        completed_at = now or utc_now()
        target = CommandStatus.COMPLETED if success else CommandStatus.FAILED

        def apply(command: Command) -> Command:
            if reporter_id is not None and command.device_id != reporter_id:
                raise NotFoundError("Command not found")
            if command.status != CommandStatus.SENT:
                raise InvalidStateError(
                    f"Command {command.id} is {command.status.value}, expected sent",
                    current_state=command.status.value,
                )
            command.status = target
            command.completed_at = completed_at
            command.result = dict(result) if result is not None else None
            return command

        command = await self.command_repository.update(command_id, apply)
        logger.info(f"Command {command_id} {command.status.value} on device {command.device_id}")
        return command

    async def expire(self, command_id: str, now: Optional[datetime] = None) -> Command:
        """
        Move a pending or sent command to ``expired``.

        Raises:
            NotFoundError: If the command is unknown
            InvalidStateError: If the command already reached a terminal state
        """
        expired_at = now or utc_now()

        def apply(command: Command) -> Command:
            if command.status.is_terminal:
                raise InvalidStateError(
                    f"Command {command.id} is already {command.status.value}",
                    current_state=command.status.value,
                )
            command.status = CommandStatus.EXPIRED
            command.completed_at = expired_at
            return command

        command = await self.command_repository.update(command_id, apply)
        logger.info(f"Command {command_id} expired for device {command.device_id}")
        return command

    async def expire_overdue(self, now: Optional[datetime] = None) -> List[Command]:
        """Expire every pending or sent command whose timeout has elapsed"""
        now = now or utc_now()
        expired: List[Command] = []
        for candidate in await self.command_repository.list_all():
            if not candidate.is_overdue(now):
                continue

            def apply(command: Command) -> Command:
                # Re-checked under the lock: a report may have landed meanwhile
                if not command.is_overdue(now):
                    raise InvalidStateError(
                        f"Command {command.id} is no longer overdue",
                        current_state=command.status.value,
                    )
                command.status = CommandStatus.EXPIRED
                command.completed_at = now
                return command

            try:
                expired.append(await self.command_repository.update(candidate.id, apply))
            except InvalidStateError as exc:
                logger.debug(f"Skipping expiry of {candidate.id}: {exc.message}")

        if expired:
            logger.info(f"Expired {len(expired)} overdue command(s)")
        return expired

    async def history(self, device_id: Optional[str] = None) -> List[Command]:
        if device_id:
            return await self.command_repository.list_by_device(device_id)
        return await self.command_repository.list_all()

    async def counts(self) -> Dict[str, int]:
        return await self.command_repository.count_by_status()


def _parse_priority(priority: Optional[str]) -> CommandPriority:
    if priority is None:
        return CommandPriority.NORMAL
    try:
        return CommandPriority(priority)
    except ValueError:
        raise ValidationError(
            f"Invalid priority '{priority}'. Allowed: high, normal, low"
        )


def _parse_timeout(timeout_seconds: Optional[int], default: int) -> int:
    if timeout_seconds is None:
        return default
    if isinstance(timeout_seconds, bool) or not isinstance(timeout_seconds, int) or timeout_seconds <= 0:
        raise ValidationError("Command timeout must be a positive number of seconds")
    return timeout_seconds
