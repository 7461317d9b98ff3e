# Standard library imports
import copy
import threading
from typing import Callable, Dict, Optional

# Local application imports
from ...domain.repositories.configuration_repository import ConfigurationRepository
from ...domain.models.configuration import DeviceConfiguration
from .keyed_lock import KeyedLock


class InMemoryConfigurationRepository(ConfigurationRepository):
    """Process-lifetime implementation of ConfigurationRepository"""

    def __init__(self) -> None:
        self._configurations: Dict[str, DeviceConfiguration] = {}
        self._table_lock = threading.Lock()
        self._device_locks = KeyedLock()

    async def find_by_device(self, device_id: str) -> Optional[DeviceConfiguration]:
        with self._table_lock:
            configuration = self._configurations.get(device_id)
        return copy.deepcopy(configuration) if configuration else None

    async def get_or_create(
        self,
        device_id: str,
        factory: Callable[[], DeviceConfiguration],
    ) -> DeviceConfiguration:
        with self._device_locks.hold(device_id):
            return copy.deepcopy(self._load_or_create(device_id, factory))

    async def update(
        self,
        device_id: str,
        factory: Callable[[], DeviceConfiguration],
        mutate: Callable[[DeviceConfiguration], DeviceConfiguration],
    ) -> DeviceConfiguration:
        with self._device_locks.hold(device_id):
            current = self._load_or_create(device_id, factory)
            updated = mutate(copy.deepcopy(current))
            with self._table_lock:
                self._configurations[device_id] = updated
            return copy.deepcopy(updated)

    def _load_or_create(
        self,
        device_id: str,
        factory: Callable[[], DeviceConfiguration],
    ) -> DeviceConfiguration:
        """Caller must hold the device lock"""
        with self._table_lock:
            configuration = self._configurations.get(device_id)
        if configuration is None:
            configuration = factory()
            with self._table_lock:
                self._configurations[device_id] = configuration
        return configuration
