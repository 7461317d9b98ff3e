# Local application imports
from ...services.configuration_store import ConfigurationStore
from ...dto.config_dto import ConfigUpdateRequest, ConfigUpdateResponse


class UpdateConfigUseCase:
    """Use case for merging a partial configuration into a device's document"""

    def __init__(self, configuration_store: ConfigurationStore) -> None:
        self.configuration_store = configuration_store

    async def execute(self, device_id: str, request: ConfigUpdateRequest) -> ConfigUpdateResponse:
        """
        Merge configuration

        Args:
            device_id: Device whose configuration changes
            request: Partial configuration; top-level keys replace existing ones

        Returns:
            ConfigUpdateResponse with the new version

        Raises:
            ValidationError: If no configuration was supplied
        """
        configuration = await self.configuration_store.merge(device_id, request.device_config)
        return ConfigUpdateResponse(
            config_version=configuration.version,
            last_updated=configuration.updated_at,
        )
