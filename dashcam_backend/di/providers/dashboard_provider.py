import time
from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.media_file_repository import MediaFileRepository
from ...application.services import DeviceRegistry, EventIntake, CommandQueue
from ...application.use_cases.dashboard import (
    GetDashboardOverviewUseCase,
    ListDevicesUseCase,
    ListRecentEventsUseCase,
    ListRecentMediaUseCase,
    ListCommandHistoryUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DashboardProvider:
    """Dashboard use case provider - read-only views over the in-memory stores"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        started_at = time.monotonic()
        limit = settings.dashboard_recent_limit

        container.register_factory(
            GetDashboardOverviewUseCase,
            lambda: GetDashboardOverviewUseCase(
                device_registry=container.get(DeviceRegistry),
                event_intake=container.get(EventIntake),
                command_queue=container.get(CommandQueue),
                media_file_repository=container.get(MediaFileRepository),
                started_at=started_at,
                environment=settings.environment,
                version=settings.app_version,
            )
        )
        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(device_registry=container.get(DeviceRegistry))
        )
        container.register_factory(
            ListRecentEventsUseCase,
            lambda: ListRecentEventsUseCase(event_intake=container.get(EventIntake), limit=limit)
        )
        container.register_factory(
            ListRecentMediaUseCase,
            lambda: ListRecentMediaUseCase(
                media_file_repository=container.get(MediaFileRepository),
                limit=limit,
            )
        )
        container.register_factory(
            ListCommandHistoryUseCase,
            lambda: ListCommandHistoryUseCase(command_queue=container.get(CommandQueue), limit=limit)
        )
