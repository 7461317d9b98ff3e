from .process_heartbeat import ProcessHeartbeatUseCase

__all__ = ["ProcessHeartbeatUseCase"]
