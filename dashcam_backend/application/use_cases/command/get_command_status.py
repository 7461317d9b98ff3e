# Local application imports
from ...services.command_queue import CommandQueue
from ...dto.command_dto import CommandStatusResponse


class GetCommandStatusUseCase:
    """Use case for looking up a command's lifecycle state"""

    def __init__(self, command_queue: CommandQueue) -> None:
        self.command_queue = command_queue

    async def execute(self, command_id: str) -> CommandStatusResponse:
        """
        Raises:
            NotFoundError: If command is unknown
        """
        command = await self.command_queue.status(command_id)
        return CommandStatusResponse(
            command_id=command.id,
            status=command.status.value,
            result=command.result,
            created_at=command.created_at,
            sent_at=command.sent_at,
            executed_at=command.completed_at,
        )
