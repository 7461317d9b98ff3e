# Standard library imports
import time

# Local application imports
from ...services.device_registry import DeviceRegistry
from ...services.event_intake import EventIntake
from ...services.command_queue import CommandQueue
from ....domain.repositories.media_file_repository import MediaFileRepository
from ...dto.dashboard_dto import DashboardOverviewResponse, DashboardStatistics, ServerInfo


class GetDashboardOverviewUseCase:
    """Use case for the dashboard's server and fleet summary"""

    def __init__(
        self,
        device_registry: DeviceRegistry,
        event_intake: EventIntake,
        command_queue: CommandQueue,
        media_file_repository: MediaFileRepository,
        started_at: float,
        environment: str,
        version: str,
    ) -> None:
        self.device_registry = device_registry
        self.event_intake = event_intake
        self.command_queue = command_queue
        self.media_file_repository = media_file_repository
        self.started_at = started_at
        self.environment = environment
        self.version = version

    async def execute(self) -> DashboardOverviewResponse:
        total_devices, online_devices = await self.device_registry.counts()
        command_counts = await self.command_queue.counts()

        return DashboardOverviewResponse(
            server=ServerInfo(
                uptime=round(time.monotonic() - self.started_at, 3),
                environment=self.environment,
                version=self.version,
            ),
            statistics=DashboardStatistics(
                total_devices=total_devices,
                online_devices=online_devices,
                total_events=await self.event_intake.count(),
                total_media_files=await self.media_file_repository.count(),
                total_commands=sum(command_counts.values()),
                commands_by_status=command_counts,
            ),
        )
