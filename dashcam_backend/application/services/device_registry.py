"""Device registry: who has talked to us, and when."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from ...domain.models.device import Device
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.exceptions import ValidationError
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

DEFAULT_ONLINE_WINDOW = timedelta(minutes=5)


@dataclass(frozen=True)
class DeviceSnapshot:
    """A device together with its online state at snapshot time"""
    device: Device
    is_online: bool


class DeviceRegistry:
    """
    Tracks known devices and their last reported telemetry.

    Online state is derived on every read from the device's last contact and
    the configured online window.
    """

    def __init__(
        self,
        device_repository: DeviceRepository,
        online_window: timedelta = DEFAULT_ONLINE_WINDOW,
    ) -> None:
        self.device_repository = device_repository
        self.online_window = online_window

    async def register(
        self,
        device_id: str,
        device_info: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Device:
        """
        Create the device on first authentication, or refresh its details.

        The original registration time survives re-authentication.
        """
        _require_device_id(device_id)
        now = now or utc_now()

        def apply(current: Optional[Device]) -> Device:
            if current is None:
                return Device(
                    device_id=device_id,
                    registered_at=now,
                    last_seen=now,
                    device_info=dict(device_info or {}),
                    ip_address=ip_address,
                    user_agent=user_agent,
                )
            current.last_seen = now
            current.device_info = dict(device_info or {})
            current.ip_address = ip_address
            current.user_agent = user_agent
            return current

        device = await self.device_repository.upsert(device_id, apply)
        logger.info(f"Device registered: {device_id} from {ip_address or 'unknown address'}")
        return device

    async def touch(
        self,
        device_id: str,
        contact_time: Optional[datetime] = None,
        location: Optional[Dict[str, Any]] = None,
        status: Optional[Dict[str, Any]] = None,
        metrics: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        reported_at: Optional[datetime] = None,
    ) -> Device:
        """
        Record contact from a device.

        Unknown devices are created. Optional fields left as None keep their
        last reported value.
        """
        _require_device_id(device_id)
        contact_time = contact_time or utc_now()

        def apply(current: Optional[Device]) -> Device:
            device = current or Device(
                device_id=device_id,
                registered_at=contact_time,
                last_seen=contact_time,
            )
            device.last_seen = contact_time
            if reported_at is not None:
                device.last_reported_at = reported_at
            if location is not None:
                device.location = location
            if status is not None:
                device.status = status
            if metrics is not None:
                device.performance_metrics = metrics
            if ip_address is not None:
                device.ip_address = ip_address
            return device

        return await self.device_repository.upsert(device_id, apply)

    def is_online(self, device: Device, now: Optional[datetime] = None) -> bool:
        return device.is_online(now or utc_now(), self.online_window)

    async def get(self, device_id: str) -> Optional[Device]:
        return await self.device_repository.find_by_id(device_id)

    async def exists(self, device_id: str) -> bool:
        return await self.device_repository.find_by_id(device_id) is not None

    async def list(self, now: Optional[datetime] = None) -> List[DeviceSnapshot]:
        now = now or utc_now()
        devices = await self.device_repository.list_all()
        return [DeviceSnapshot(device=device, is_online=self.is_online(device, now)) for device in devices]

    async def counts(self, now: Optional[datetime] = None) -> Tuple[int, int]:
        """Return (total devices, online devices)"""
        snapshots = await self.list(now)
        return len(snapshots), sum(1 for snapshot in snapshots if snapshot.is_online)


def _require_device_id(device_id: str) -> None:
    if not device_id or not str(device_id).strip():
        raise ValidationError("Device ID is required")
