# External package imports
from fastapi import APIRouter, Request

# Local application imports
from ...application.dto.auth_dto import (
    DeviceAuthRequest,
    DeviceTokenResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from ...application.dto.common_dto import ApiResponse
from ...application.use_cases.auth.authenticate_device import AuthenticateDeviceUseCase
from ...application.use_cases.auth.refresh_token import RefreshTokenUseCase
from ...di.container import get_container
from .dependencies import client_ip


router = APIRouter(tags=["authentication"])


@router.post("/token", response_model=ApiResponse[DeviceTokenResponse])
async def issue_token(request: DeviceAuthRequest, http_request: Request) -> ApiResponse[DeviceTokenResponse]:
    """
    Authenticate a device and issue its access token

    Args:
        request: Device ID, secret and optional device info
        http_request: Raw request, for the caller's address and user agent

    Returns:
        Access token, refresh handle and expiry
    """
    container = get_container()
    authenticate_use_case = container.get(AuthenticateDeviceUseCase)

    token = await authenticate_use_case.execute(
        request,
        ip_address=client_ip(http_request),
        user_agent=http_request.headers.get("user-agent"),
    )
    return ApiResponse[DeviceTokenResponse](data=token)


@router.post("/refresh", response_model=ApiResponse[RefreshTokenResponse])
async def refresh_token(request: RefreshTokenRequest) -> ApiResponse[RefreshTokenResponse]:
    """Exchange a refresh handle for a new access token"""
    container = get_container()
    refresh_use_case = container.get(RefreshTokenUseCase)

    token = await refresh_use_case.execute(request)
    return ApiResponse[RefreshTokenResponse](data=token)
