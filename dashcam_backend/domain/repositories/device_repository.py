from abc import ABC, abstractmethod
from typing import Callable, List, Optional
from ..models.device import Device


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Device]:
        """Snapshot of every known device"""
        pass

    @abstractmethod
    async def upsert(
        self,
        device_id: str,
        mutate: Callable[[Optional[Device]], Device],
    ) -> Device:
        """
        Atomically create or update a device.

        ``mutate`` receives the current device (or None) and returns the new one;
        it runs while the device's lock is held.
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of known devices"""
        pass
