# Local application imports
from ...services.device_registry import DeviceRegistry
from ...dto.device_dto import DeviceListResponse, DeviceResponse


class ListDevicesUseCase:
    """Use case for listing every known device with its online state"""

    def __init__(self, device_registry: DeviceRegistry) -> None:
        self.device_registry = device_registry

    async def execute(self) -> DeviceListResponse:
        snapshots = await self.device_registry.list()
        devices = [
            DeviceResponse(
                device_id=snapshot.device.device_id,
                device_info=snapshot.device.device_info,
                registration_date=snapshot.device.registered_at,
                last_seen=snapshot.device.last_seen,
                last_reported_at=snapshot.device.last_reported_at,
                location=snapshot.device.location,
                status=snapshot.device.status,
                performance_metrics=snapshot.device.performance_metrics,
                ip_address=snapshot.device.ip_address,
                user_agent=snapshot.device.user_agent,
                is_online=snapshot.is_online,
            )
            for snapshot in snapshots
        ]
        return DeviceListResponse(
            devices=devices,
            total_devices=len(devices),
            online_devices=sum(1 for device in devices if device.is_online),
        )
