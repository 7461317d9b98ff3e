from .authenticate_device import AuthenticateDeviceUseCase
from .refresh_token import RefreshTokenUseCase
from .get_current_device import GetCurrentDeviceUseCase

__all__ = [
    "AuthenticateDeviceUseCase",
    "RefreshTokenUseCase",
    "GetCurrentDeviceUseCase",
]
