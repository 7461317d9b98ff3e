from typing import Any, Dict, Optional

from .common_dto import CamelModel


class DeviceAuthRequest(CamelModel):
    """DTO for device authentication request"""
    device_id: Optional[str] = None
    device_secret: Optional[str] = None
    device_info: Optional[Dict[str, Any]] = None


class RefreshTokenRequest(CamelModel):
    """DTO for access token refresh request"""
    refresh_token: Optional[str] = None


class DeviceTokenResponse(CamelModel):
    """DTO for authentication token response"""
    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "Bearer"
    device_id: str


class RefreshTokenResponse(CamelModel):
    """DTO for refreshed access token"""
    access_token: str
    expires_in: int


class AuthenticatedDevice(CamelModel):
    """Identity of the device behind the current request"""
    device_id: str
    scope: list[str]
    device_type: Optional[str] = None
