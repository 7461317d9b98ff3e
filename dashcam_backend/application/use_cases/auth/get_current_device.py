# Standard library imports
from typing import Optional

# Local application imports
from ...services.token_service import TokenService
from ...dto.auth_dto import AuthenticatedDevice


class GetCurrentDeviceUseCase:
    """Use case for resolving the device behind a bearer token"""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, token: Optional[str]) -> AuthenticatedDevice:
        """
        Get current device from a bearer token

        Args:
            token: JWT access token, or None when no credential was sent

        Returns:
            AuthenticatedDevice with device ID and scope

        Raises:
            AuthRequiredError: If token is missing
            AuthInvalidError: If token is invalid or expired
        """
        identity = self.token_service.verify(token)
        return AuthenticatedDevice(
            device_id=identity.device_id,
            scope=list(identity.scope),
            device_type=identity.device_type,
        )
