from typing import TYPE_CHECKING
from ...application.services import CommandQueue
from ...application.use_cases.command.enqueue_command import EnqueueCommandUseCase
from ...application.use_cases.command.get_command_status import GetCommandStatusUseCase
from ...application.use_cases.command.report_command_result import ReportCommandResultUseCase
from ...application.use_cases.command.expire_overdue_commands import ExpireOverdueCommandsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CommandProvider:
    """Command use case provider - registers enqueue, status, result and expiry use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            EnqueueCommandUseCase,
            lambda: EnqueueCommandUseCase(command_queue=container.get(CommandQueue))
        )
        container.register_factory(
            GetCommandStatusUseCase,
            lambda: GetCommandStatusUseCase(command_queue=container.get(CommandQueue))
        )
        container.register_factory(
            ReportCommandResultUseCase,
            lambda: ReportCommandResultUseCase(command_queue=container.get(CommandQueue))
        )
        container.register_factory(
            ExpireOverdueCommandsUseCase,
            lambda: ExpireOverdueCommandsUseCase(command_queue=container.get(CommandQueue))
        )
