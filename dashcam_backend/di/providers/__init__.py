from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider
from .auth_provider import AuthProvider
from .config_provider import ConfigProvider
from .heartbeat_provider import HeartbeatProvider
from .command_provider import CommandProvider
from .event_provider import EventProvider
from .media_provider import MediaProvider
from .dashboard_provider import DashboardProvider


__all__ = [
    "RepositoryProvider",
    "ServiceProvider",
    "AuthProvider",
    "ConfigProvider",
    "HeartbeatProvider",
    "CommandProvider",
    "EventProvider",
    "MediaProvider",
    "DashboardProvider",
]
