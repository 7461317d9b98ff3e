# Standard library imports
import logging
from datetime import timedelta
from typing import Optional

# Local application imports
from ...services.command_queue import CommandQueue
from ...dto.command_dto import CommandCreateRequest, CommandCreateResponse
from ....domain.constants.command_constants import (
    ESTIMATED_EXECUTION_DELAY_SECONDS,
    QUEUED_STATUS_LABEL,
)

logger = logging.getLogger(__name__)


class EnqueueCommandUseCase:
    """Use case for queueing a command for a device"""

    def __init__(self, command_queue: CommandQueue) -> None:
        self.command_queue = command_queue

    async def execute(
        self,
        device_id: str,
        request: CommandCreateRequest,
        created_by: Optional[str] = None,
    ) -> CommandCreateResponse:
        """
        Queue a command

        Args:
            device_id: Target device (need not have connected yet)
            request: Command type, parameters, priority and timeout
            created_by: Device ID of the caller issuing the command

        Returns:
            CommandCreateResponse with the new command ID

        Raises:
            ValidationError: If the command is malformed
        """
        command = await self.command_queue.enqueue(
            device_id,
            request.command_type,
            parameters=request.parameters,
            priority=request.priority,
            timeout_seconds=request.timeout,
            created_by=created_by,
        )
        return CommandCreateResponse(
            command_id=command.id,
            status=QUEUED_STATUS_LABEL,
            estimated_execution_time=command.created_at + timedelta(seconds=ESTIMATED_EXECUTION_DELAY_SECONDS),
        )
