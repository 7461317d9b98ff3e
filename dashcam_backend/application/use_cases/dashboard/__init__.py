from .get_overview import GetDashboardOverviewUseCase
from .list_devices import ListDevicesUseCase
from .list_events import ListRecentEventsUseCase
from .list_media import ListRecentMediaUseCase
from .list_commands import ListCommandHistoryUseCase

__all__ = [
    "GetDashboardOverviewUseCase",
    "ListDevicesUseCase",
    "ListRecentEventsUseCase",
    "ListRecentMediaUseCase",
    "ListCommandHistoryUseCase",
]
