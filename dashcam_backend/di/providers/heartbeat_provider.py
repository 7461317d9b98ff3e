from typing import TYPE_CHECKING
from ...application.services import HeartbeatCoordinator
from ...application.use_cases.heartbeat.process_heartbeat import ProcessHeartbeatUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class HeartbeatProvider:
    """Heartbeat use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ProcessHeartbeatUseCase,
            lambda: ProcessHeartbeatUseCase(heartbeat_coordinator=container.get(HeartbeatCoordinator))
        )
