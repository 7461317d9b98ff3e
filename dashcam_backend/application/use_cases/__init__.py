from .auth import (
    AuthenticateDeviceUseCase,
    RefreshTokenUseCase,
    GetCurrentDeviceUseCase,
)
from .config import GetConfigUseCase, UpdateConfigUseCase
from .heartbeat import ProcessHeartbeatUseCase
from .command import (
    EnqueueCommandUseCase,
    GetCommandStatusUseCase,
    ReportCommandResultUseCase,
    ExpireOverdueCommandsUseCase,
)
from .event import ReportEventUseCase
from .media import RegisterMediaUseCase, GetMediaStatusUseCase
from .dashboard import (
    GetDashboardOverviewUseCase,
    ListDevicesUseCase,
    ListRecentEventsUseCase,
    ListRecentMediaUseCase,
    ListCommandHistoryUseCase,
)

__all__ = [
    "AuthenticateDeviceUseCase",
    "RefreshTokenUseCase",
    "GetCurrentDeviceUseCase",
    "GetConfigUseCase",
    "UpdateConfigUseCase",
    "ProcessHeartbeatUseCase",
    "EnqueueCommandUseCase",
    "GetCommandStatusUseCase",
    "ReportCommandResultUseCase",
    "ExpireOverdueCommandsUseCase",
    "ReportEventUseCase",
    "RegisterMediaUseCase",
    "GetMediaStatusUseCase",
    "GetDashboardOverviewUseCase",
    "ListDevicesUseCase",
    "ListRecentEventsUseCase",
    "ListRecentMediaUseCase",
    "ListCommandHistoryUseCase",
]
