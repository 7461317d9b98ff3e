from .device_repository import DeviceRepository
from .configuration_repository import ConfigurationRepository
from .command_repository import CommandRepository
from .event_repository import EventRepository
from .media_file_repository import MediaFileRepository

__all__ = [
    "DeviceRepository",
    "ConfigurationRepository",
    "CommandRepository",
    "EventRepository",
    "MediaFileRepository",
]
