# Standard library imports
import copy
import threading
from typing import Callable, Dict, List, Optional

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from .keyed_lock import KeyedLock


class InMemoryDeviceRepository(DeviceRepository):
    """Process-lifetime implementation of DeviceRepository"""

    def __init__(self) -> None:
        self._devices: Dict[str, Device] = {}
        self._table_lock = threading.Lock()
        self._device_locks = KeyedLock()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        if not device_id:
            return None
        with self._table_lock:
            device = self._devices.get(device_id)
        return copy.deepcopy(device) if device else None

    async def list_all(self) -> List[Device]:
        with self._table_lock:
            devices = list(self._devices.values())
        return [copy.deepcopy(device) for device in devices]

    async def upsert(
        self,
        device_id: str,
        mutate: Callable[[Optional[Device]], Device],
    ) -> Device:
        if not device_id:
            raise ValueError("Device ID cannot be empty")

        with self._device_locks.hold(device_id):
            with self._table_lock:
                current = self._devices.get(device_id)
            updated = mutate(copy.deepcopy(current) if current else None)
            if updated.device_id != device_id:
                raise ValueError("Device ID cannot change on update")
            with self._table_lock:
                self._devices[device_id] = updated
            return copy.deepcopy(updated)

    async def count(self) -> int:
        with self._table_lock:
            return len(self._devices)
