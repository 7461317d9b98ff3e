"""Per-device configuration documents with default materialization and shallow merge."""
import copy
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, Optional

from ...domain.constants import config_defaults as defaults
from ...domain.constants.config_defaults import ConfigFields
from ...domain.models.configuration import DeviceConfiguration
from ...domain.repositories.configuration_repository import ConfigurationRepository
from ...domain.exceptions import ValidationError
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

INITIAL_CONFIG_VERSION = 1


class ConfigurationStore:
    """
    Holds one configuration document per device.

    Reads materialize a default document the first time a device is seen.
    Updates are a shallow merge: incoming top-level keys replace existing ones
    (nested sections included), absent keys are kept.
    """

    def __init__(
        self,
        configuration_repository: ConfigurationRepository,
        server_base_url: str,
    ) -> None:
        self.configuration_repository = configuration_repository
        self.server_base_url = server_base_url

    def default_document(self, device_id: str) -> Dict[str, Any]:
        """Default configuration; depends only on the device ID and process-wide defaults"""
        return {
            ConfigFields.DEVICE_ID: device_id,
            ConfigFields.SEGMENT_LENGTH_SECONDS: defaults.SEGMENT_LENGTH_SECONDS,
            ConfigFields.PRE_EVENT_SECONDS: defaults.PRE_EVENT_SECONDS,
            ConfigFields.POST_EVENT_SECONDS: defaults.POST_EVENT_SECONDS,
            ConfigFields.HEARTBEAT_INTERVAL_SECONDS: defaults.HEARTBEAT_INTERVAL_SECONDS,
            ConfigFields.SNAPSHOT_INTERVAL_MINUTES: defaults.SNAPSHOT_INTERVAL_MINUTES,
            ConfigFields.AUDIO_RECORDING_ENABLED: defaults.AUDIO_RECORDING_ENABLED,
            ConfigFields.COLLISION_SENSITIVITY: defaults.COLLISION_SENSITIVITY,
            ConfigFields.SERVER_BASE_URL: self.server_base_url,
            ConfigFields.NETWORK_THROTTLE_CONFIG: copy.deepcopy(defaults.NETWORK_THROTTLE_CONFIG),
            ConfigFields.CAMERA_CONFIG: copy.deepcopy(defaults.CAMERA_CONFIG),
            ConfigFields.STORAGE_CONFIG: copy.deepcopy(defaults.STORAGE_CONFIG),
            ConfigFields.GPS_CONFIG: copy.deepcopy(defaults.GPS_CONFIG),
            ConfigFields.EVENT_DETECTION: copy.deepcopy(defaults.EVENT_DETECTION),
        }

    async def get(self, device_id: str, now: Optional[datetime] = None) -> DeviceConfiguration:
        """Return the device's configuration, storing the default on first access"""
        if not device_id:
            raise ValidationError("Device ID is required")
        return await self.configuration_repository.get_or_create(
            device_id, lambda: self._materialize(device_id, now)
        )

    async def merge(
        self,
        device_id: str,
        partial: Optional[Mapping],
        now: Optional[datetime] = None,
    ) -> DeviceConfiguration:
        """
        Shallow-merge ``partial`` into the device's configuration.

        Raises:
            ValidationError: If partial is missing, empty or not an object
        """
        if not device_id:
            raise ValidationError("Device ID is required")
        if partial is None or not isinstance(partial, Mapping) or not partial:
            raise ValidationError("Device configuration required")

        updates = {
            key: copy.deepcopy(value)
            for key, value in partial.items()
            if key != ConfigFields.DEVICE_ID
        }
        if not updates:
            raise ValidationError("Device configuration has no updatable fields")
        updated_at = now or utc_now()

        def apply(current: DeviceConfiguration) -> DeviceConfiguration:
            current.document.update(updates)
            current.version += 1
            current.updated_at = updated_at
            return current

        configuration = await self.configuration_repository.update(
            device_id, lambda: self._materialize(device_id, now), apply
        )
        logger.info(
            f"Configuration updated for device: {device_id} "
            f"(version {configuration.version}, keys: {sorted(updates)})"
        )
        return configuration

    def _materialize(self, device_id: str, now: Optional[datetime]) -> DeviceConfiguration:
        logger.debug(f"Materializing default configuration for device {device_id}")
        return DeviceConfiguration(
            device_id=device_id,
            document=self.default_document(device_id),
            version=INITIAL_CONFIG_VERSION,
            updated_at=now or utc_now(),
        )
