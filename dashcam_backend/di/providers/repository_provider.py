from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.configuration_repository import ConfigurationRepository
from ...domain.repositories.command_repository import CommandRepository
from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.media_file_repository import MediaFileRepository
from ...infrastructure.memory import (
    InMemoryDeviceRepository,
    InMemoryConfigurationRepository,
    InMemoryCommandRepository,
    InMemoryEventRepository,
    InMemoryMediaFileRepository,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        State lives for the lifetime of the container.
        """
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(DeviceRepository, InMemoryDeviceRepository())
        container.register_singleton(ConfigurationRepository, InMemoryConfigurationRepository())
        container.register_singleton(CommandRepository, InMemoryCommandRepository())
        container.register_singleton(EventRepository, InMemoryEventRepository())
        container.register_singleton(MediaFileRepository, InMemoryMediaFileRepository())
