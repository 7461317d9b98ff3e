from typing import TYPE_CHECKING
from ...application.services import TokenService, ConfigurationStore
from ...application.use_cases.auth.authenticate_device import AuthenticateDeviceUseCase
from ...application.use_cases.auth.refresh_token import RefreshTokenUseCase
from ...application.use_cases.auth.get_current_device import GetCurrentDeviceUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        # Register AuthenticateDeviceUseCase
        container.register_factory(
            AuthenticateDeviceUseCase,
            lambda: AuthenticateDeviceUseCase(
                token_service=container.get(TokenService),
                configuration_store=container.get(ConfigurationStore),
            )
        )

        # Register RefreshTokenUseCase
        container.register_factory(
            RefreshTokenUseCase,
            lambda: RefreshTokenUseCase(token_service=container.get(TokenService))
        )

        # Register GetCurrentDeviceUseCase
        container.register_factory(
            GetCurrentDeviceUseCase,
            lambda: GetCurrentDeviceUseCase(token_service=container.get(TokenService))
        )
