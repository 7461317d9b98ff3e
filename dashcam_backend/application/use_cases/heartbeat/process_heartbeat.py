# Standard library imports
from typing import Optional

# Local application imports
from ...services.heartbeat_coordinator import HeartbeatCoordinator
from ...dto.heartbeat_dto import HeartbeatRequest, HeartbeatResponse, CommandSummaryResponse


class ProcessHeartbeatUseCase:
    """Use case for handling a device heartbeat"""

    def __init__(self, heartbeat_coordinator: HeartbeatCoordinator) -> None:
        self.heartbeat_coordinator = heartbeat_coordinator

    async def execute(
        self,
        device_id: str,
        request: HeartbeatRequest,
        ip_address: Optional[str] = None,
    ) -> HeartbeatResponse:
        result = await self.heartbeat_coordinator.handle_heartbeat(
            device_id,
            timestamp=request.timestamp,
            location=request.location,
            status=request.device_status,
            metrics=request.performance_metrics,
            ip_address=ip_address,
        )
        return HeartbeatResponse(
            commands=[
                CommandSummaryResponse(id=summary.id, type=summary.type, parameters=summary.parameters)
                for summary in result.commands
            ],
            config_update_available=result.config_update_available,
            server_time=result.server_time,
        )
