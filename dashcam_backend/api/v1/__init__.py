from .auth_controller import router as auth_router
from .config_controller import router as config_router
from .heartbeat_controller import router as heartbeat_router
from .command_controller import router as command_router
from .event_controller import router as event_router
from .media_controller import router as media_router
from .dashboard_controller import router as dashboard_router


__all__ = [
    "auth_router",
    "config_router",
    "heartbeat_router",
    "command_router",
    "event_router",
    "media_router",
    "dashboard_router",
]
