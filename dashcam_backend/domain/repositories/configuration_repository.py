from abc import ABC, abstractmethod
from typing import Callable, Optional
from ..models.configuration import DeviceConfiguration


class ConfigurationRepository(ABC):
    """Repository interface - defines contract for device configuration access"""

    @abstractmethod
    async def find_by_device(self, device_id: str) -> Optional[DeviceConfiguration]:
        """Find the stored configuration for a device"""
        pass

    @abstractmethod
    async def get_or_create(
        self,
        device_id: str,
        factory: Callable[[], DeviceConfiguration],
    ) -> DeviceConfiguration:
        """Return the stored configuration, storing ``factory()`` first if there is none"""
        pass

    @abstractmethod
    async def update(
        self,
        device_id: str,
        factory: Callable[[], DeviceConfiguration],
        mutate: Callable[[DeviceConfiguration], DeviceConfiguration],
    ) -> DeviceConfiguration:
        """Atomically apply ``mutate`` to the stored (or freshly created) configuration"""
        pass
