# Standard library imports
from typing import Optional

# Local application imports
from ...services.command_queue import CommandQueue
from ...dto.command_dto import CommandHistoryItem, CommandHistoryResponse


class ListCommandHistoryUseCase:
    """Use case for the dashboard's command history, newest first"""

    def __init__(self, command_queue: CommandQueue, limit: int = 50) -> None:
        self.command_queue = command_queue
        self.limit = limit

    async def execute(self, device_id: Optional[str] = None) -> CommandHistoryResponse:
        commands = await self.command_queue.history(device_id)
        newest = list(reversed(commands))[: self.limit]
        return CommandHistoryResponse(
            commands=[
                CommandHistoryItem(
                    id=command.id,
                    device_id=command.device_id,
                    command_type=command.command_type,
                    parameters=command.parameters,
                    priority=command.priority.value,
                    timeout=command.timeout_seconds,
                    status=command.status.value,
                    created_at=command.created_at,
                    created_by=command.created_by,
                    sent_at=command.sent_at,
                    completed_at=command.completed_at,
                    result=command.result,
                )
                for command in newest
            ],
            total_commands=len(commands),
            status_counts=await self.command_queue.counts(),
        )
