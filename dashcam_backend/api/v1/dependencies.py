# Standard library imports
from typing import Callable, Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_device import GetCurrentDeviceUseCase
from ...application.dto.auth_dto import AuthenticatedDevice
from ...application.services.token_service import SCOPE_READ, SCOPE_UPLOAD, SCOPE_WRITE
from ...domain.exceptions import InsufficientScopeError
from ...di.container import get_container


# auto_error is off so a missing header reaches the use case and becomes AUTH_REQUIRED
security_scheme = HTTPBearer(auto_error=False)


async def get_current_device(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> AuthenticatedDevice:
    """
    FastAPI dependency to get the authenticated device from its bearer token

    Args:
        credentials: HTTP Bearer token credentials, if any were sent

    Returns:
        AuthenticatedDevice with device ID and scope

    Raises:
        AuthRequiredError: If no token was sent
        AuthInvalidError: If the token is invalid or expired
    """
    token = credentials.credentials if credentials else None

    container = get_container()
    get_current_device_use_case = container.get(GetCurrentDeviceUseCase)
    return await get_current_device_use_case.execute(token)


def require_scope(scope: str) -> Callable:
    """Build a dependency that also demands ``scope`` on the caller's token"""

    async def dependency(
        current_device: AuthenticatedDevice = Depends(get_current_device),
    ) -> AuthenticatedDevice:
        if scope not in current_device.scope:
            raise InsufficientScopeError(f"Token lacks the '{scope}' scope")
        return current_device

    return dependency


require_read = require_scope(SCOPE_READ)
require_write = require_scope(SCOPE_WRITE)
require_upload = require_scope(SCOPE_UPLOAD)


def client_ip(request: Request) -> Optional[str]:
    """Caller address, preferring the first hop of X-Forwarded-For"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    return request.client.host if request.client else None
