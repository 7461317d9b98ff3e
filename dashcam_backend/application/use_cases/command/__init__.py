from .enqueue_command import EnqueueCommandUseCase
from .get_command_status import GetCommandStatusUseCase
from .report_command_result import ReportCommandResultUseCase
from .expire_overdue_commands import ExpireOverdueCommandsUseCase

__all__ = [
    "EnqueueCommandUseCase",
    "GetCommandStatusUseCase",
    "ReportCommandResultUseCase",
    "ExpireOverdueCommandsUseCase",
]
