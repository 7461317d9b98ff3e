# Local application imports
from ...services.command_queue import CommandQueue


class ExpireOverdueCommandsUseCase:
    """Use case run by the periodic sweep to expire timed-out commands"""

    def __init__(self, command_queue: CommandQueue) -> None:
        self.command_queue = command_queue

    async def execute(self) -> int:
        """Returns the number of commands expired"""
        expired = await self.command_queue.expire_overdue()
        return len(expired)
