# Standard library imports
from typing import Optional

# Local application imports
from ...services.token_service import TokenService
from ...services.configuration_store import ConfigurationStore
from ...dto.auth_dto import DeviceAuthRequest, DeviceTokenResponse


class AuthenticateDeviceUseCase:
    """Use case for authenticating a device and issuing its credentials"""

    def __init__(
        self,
        token_service: TokenService,
        configuration_store: ConfigurationStore,
    ) -> None:
        self.token_service = token_service
        self.configuration_store = configuration_store

    async def execute(
        self,
        request: DeviceAuthRequest,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> DeviceTokenResponse:
        """
        Authenticate a device

        Args:
            request: Device ID, secret and optional device info
            ip_address: Network address the request came from
            user_agent: Client user agent

        Returns:
            DeviceTokenResponse with access token and refresh handle

        Raises:
            ValidationError: If device ID or secret is missing
            AuthInvalidError: If the secret is wrong
        """
        credential = await self.token_service.issue(
            request.device_id,
            request.device_secret,
            device_info=request.device_info,
            ip_address=ip_address,
            user_agent=user_agent,
        )

        # Make sure the device has a configuration to fetch right away
        await self.configuration_store.get(credential.device_id)

        return DeviceTokenResponse(
            access_token=credential.access_token,
            refresh_token=credential.refresh_token or "",
            expires_in=credential.expires_in,
            token_type=credential.token_type,
            device_id=credential.device_id,
        )
