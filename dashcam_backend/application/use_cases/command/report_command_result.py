# Local application imports
from ...services.command_queue import CommandQueue
from ...dto.command_dto import CommandResultRequest, CommandResultResponse


class ReportCommandResultUseCase:
    """Use case for a device reporting the outcome of a delivered command"""

    def __init__(self, command_queue: CommandQueue) -> None:
        self.command_queue = command_queue

    async def execute(
        self,
        command_id: str,
        device_id: str,
        request: CommandResultRequest,
    ) -> CommandResultResponse:
        """
        Record a command result

        Args:
            command_id: Command being reported on
            device_id: Reporting device; must be the command's target
            request: Success flag and optional result document

        Raises:
            NotFoundError: If the command is unknown to this device
            InvalidStateError: If the command is not awaiting a result
        """
        command = await self.command_queue.complete(
            command_id,
            result=request.result,
            success=request.success,
            reporter_id=device_id,
        )
        return CommandResultResponse(command_id=command.id, status=command.status.value)
