# Local application imports
from ...services.configuration_store import ConfigurationStore
from ...dto.config_dto import DeviceConfigResponse
from ....utils.datetime_utils import utc_now


class GetConfigUseCase:
    """Use case for fetching a device's configuration"""

    def __init__(self, configuration_store: ConfigurationStore) -> None:
        self.configuration_store = configuration_store

    async def execute(self, device_id: str) -> DeviceConfigResponse:
        configuration = await self.configuration_store.get(device_id)
        return DeviceConfigResponse(
            device_config=configuration.document,
            config_version=configuration.version,
            last_updated=configuration.updated_at,
            server_time=utc_now(),
        )
