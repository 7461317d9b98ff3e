from datetime import timedelta
from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import SharedSecretCredentialPolicy
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.configuration_repository import ConfigurationRepository
from ...domain.repositories.command_repository import CommandRepository
from ...domain.repositories.event_repository import EventRepository
from ...application.services import (
    DeviceRegistry,
    ConfigurationStore,
    CommandQueue,
    EventIntake,
    HeartbeatCoordinator,
    TokenService,
    emergency_contact_rule,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Service provider - registers the stateful coordinators as singletons"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        device_registry = DeviceRegistry(
            device_repository=container.get(DeviceRepository),
            online_window=timedelta(seconds=settings.device_online_window_seconds),
        )
        command_queue = CommandQueue(
            command_repository=container.get(CommandRepository),
            default_timeout_seconds=settings.default_command_timeout_seconds,
        )

        container.register_singleton(DeviceRegistry, device_registry)
        container.register_singleton(CommandQueue, command_queue)
        container.register_singleton(
            ConfigurationStore,
            ConfigurationStore(
                configuration_repository=container.get(ConfigurationRepository),
                server_base_url=settings.server_base_url,
            ),
        )
        container.register_singleton(
            EventIntake,
            EventIntake(
                event_repository=container.get(EventRepository),
                action_rules=[
                    emergency_contact_rule(
                        settings.emergency_severity_threshold,
                        settings.emergency_contact_id,
                    ),
                ],
            ),
        )
        container.register_singleton(
            HeartbeatCoordinator,
            HeartbeatCoordinator(device_registry=device_registry, command_queue=command_queue),
        )
        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                credential_policy=SharedSecretCredentialPolicy(
                    settings.device_shared_secret,
                    rounds=settings.bcrypt_rounds,
                ),
                device_registry=device_registry,
                algorithm=settings.jwt_algorithm,
                expires_in_seconds=settings.access_token_expire_seconds,
                device_type=settings.device_type,
            ),
        )
