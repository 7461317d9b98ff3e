from .keyed_lock import KeyedLock
from .memory_device_repository import InMemoryDeviceRepository
from .memory_configuration_repository import InMemoryConfigurationRepository
from .memory_command_repository import InMemoryCommandRepository
from .memory_event_repository import InMemoryEventRepository
from .memory_media_file_repository import InMemoryMediaFileRepository

__all__ = [
    "KeyedLock",
    "InMemoryDeviceRepository",
    "InMemoryConfigurationRepository",
    "InMemoryCommandRepository",
    "InMemoryEventRepository",
    "InMemoryMediaFileRepository",
]
