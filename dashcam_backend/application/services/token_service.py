"""Token service: issue, verify and refresh device bearer credentials."""
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, Tuple

from ...core.security import create_jwt_token, decode_jwt_token
from ...domain.exceptions import AuthInvalidError, AuthRequiredError, ValidationError
from ...utils.datetime_utils import epoch_millis, utc_now
from .device_registry import DeviceRegistry

logger = logging.getLogger(__name__)

SCOPE_READ = "read"
SCOPE_WRITE = "write"
SCOPE_UPLOAD = "upload"
DEFAULT_SCOPE: Tuple[str, ...] = (SCOPE_READ, SCOPE_WRITE, SCOPE_UPLOAD)

REFRESH_PREFIX = "refresh-"
_REFRESH_PATTERN = re.compile(r"^refresh-(?P<device_id>.+)-(?P<issued>\d+)$")


class CredentialPolicy(Protocol):
    """Decides whether a device secret is valid"""

    def verify(self, device_id: str, device_secret: str) -> bool:
        ...


@dataclass(frozen=True)
class Credential:
    access_token: str
    expires_in: int
    device_id: str
    scope: Tuple[str, ...]
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"


@dataclass(frozen=True)
class DeviceIdentity:
    """Claims recovered from a verified access token"""
    device_id: str
    scope: Tuple[str, ...]
    device_type: Optional[str] = None

    def has_scope(self, scope: str) -> bool:
        return scope in self.scope


def build_refresh_handle(device_id: str, issued_at: Optional[datetime] = None) -> str:
    return f"{REFRESH_PREFIX}{device_id}-{epoch_millis(issued_at)}"


def parse_refresh_handle(handle: str) -> Optional[str]:
    """Device ID carried by a refresh handle, or None when malformed"""
    match = _REFRESH_PATTERN.match(handle or "")
    return match.group("device_id") if match else None


class TokenService:
    """
    Issues and verifies stateless device credentials.

    Verification depends only on the token and the signing key given at
    construction; nothing is stored per token.
    """

    def __init__(
        self,
        secret_key: str,
        credential_policy: CredentialPolicy,
        device_registry: DeviceRegistry,
        algorithm: str = "HS256",
        expires_in_seconds: int = 86400,
        device_type: str = "dashcam",
        scope: Tuple[str, ...] = DEFAULT_SCOPE,
    ) -> None:
        if not secret_key:
            raise ValueError("Token signing key is required")
        self._secret_key = secret_key
        self.credential_policy = credential_policy
        self.device_registry = device_registry
        self.algorithm = algorithm
        self.expires_in_seconds = expires_in_seconds
        self.device_type = device_type
        self.scope = tuple(scope)

    async def issue(
        self,
        device_id: Optional[str],
        device_secret: Optional[str],
        device_info: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Credential:
        """
        Authenticate a device and issue an access token plus refresh handle.

        Raises:
            ValidationError: If device ID or secret is missing
            AuthInvalidError: If the secret is rejected by the credential policy
        """
        if not device_id or not device_secret:
            raise ValidationError("Device ID and secret are required")
        if not self.credential_policy.verify(device_id, device_secret):
            logger.warning(f"Rejected credentials for device {device_id} from {ip_address or 'unknown address'}")
            raise AuthInvalidError("Invalid device credentials")

        now = now or utc_now()
        await self.device_registry.register(
            device_id,
            device_info=device_info,
            ip_address=ip_address,
            user_agent=user_agent,
            now=now,
        )

        logger.info(f"Device authenticated: {device_id} from {ip_address or 'unknown address'}")
        return Credential(
            access_token=self.create_access_token(device_id, issued_at=int(now.timestamp())),
            refresh_token=build_refresh_handle(device_id, now),
            expires_in=self.expires_in_seconds,
            device_id=device_id,
            scope=self.scope,
        )

    def verify(self, token: Optional[str]) -> DeviceIdentity:
        """
        Resolve a bearer token to the device identity it was issued for.

        Raises:
            AuthRequiredError: If no token is presented
            AuthInvalidError: If the signature, structure or expiry check fails
        """
        if not token:
            raise AuthRequiredError("Access token required")
        try:
            claims = decode_jwt_token(token, self._secret_key, self.algorithm)
        except ValueError:
            raise AuthInvalidError("Invalid access token")

        device_id = claims.get("sub")
        if not device_id or not isinstance(device_id, str):
            raise AuthInvalidError("Invalid access token")
        scope = claims.get("scope") or ()
        if isinstance(scope, str):
            scope = scope.split()
        return DeviceIdentity(
            device_id=device_id,
            scope=tuple(scope),
            device_type=claims.get("deviceType"),
        )

    async def refresh(self, refresh_token: Optional[str], now: Optional[datetime] = None) -> Credential:
        """
        Re-issue an access token from a refresh handle.

        Raises:
            ValidationError: If no handle is presented
            AuthInvalidError: If the handle is malformed or names an unknown device
        """
        if not refresh_token:
            raise ValidationError("Refresh token required")
        device_id = parse_refresh_handle(refresh_token)
        if device_id is None or not await self.device_registry.exists(device_id):
            raise AuthInvalidError("Invalid refresh token")

        now = now or utc_now()
        logger.info(f"Access token refreshed for device {device_id}")
        return Credential(
            access_token=self.create_access_token(device_id, issued_at=int(now.timestamp())),
            expires_in=self.expires_in_seconds,
            device_id=device_id,
            scope=self.scope,
        )

    def create_access_token(self, device_id: str, issued_at: Optional[int] = None) -> str:
        return create_jwt_token(
            {
                "sub": device_id,
                "deviceType": self.device_type,
                "scope": list(self.scope),
            },
            self._secret_key,
            algorithm=self.algorithm,
            expires_in_seconds=self.expires_in_seconds,
            issued_at=issued_at,
        )
