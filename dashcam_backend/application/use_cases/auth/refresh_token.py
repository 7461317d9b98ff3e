# Local application imports
from ...services.token_service import TokenService
from ...dto.auth_dto import RefreshTokenRequest, RefreshTokenResponse


class RefreshTokenUseCase:
    """Use case for exchanging a refresh handle for a new access token"""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, request: RefreshTokenRequest) -> RefreshTokenResponse:
        credential = await self.token_service.refresh(request.refresh_token)
        return RefreshTokenResponse(
            access_token=credential.access_token,
            expires_in=credential.expires_in,
        )
