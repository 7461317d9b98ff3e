# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError, DecodeError


def hash_secret(plain_secret: str, rounds: int = 12) -> str:
    """
    Hash a plain device secret using bcrypt

    Args:
        plain_secret: The plain text secret to hash
        rounds: bcrypt cost factor

    Returns:
        Hashed secret string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_secret.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_secret(plain_secret: str, hashed_secret: str) -> bool:
    """
    Verify a plain secret against a hashed secret

    Args:
        plain_secret: The plain text secret to verify
        hashed_secret: The hashed secret to compare against

    Returns:
        True if secrets match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_secret.encode("utf-8"),
            hashed_secret.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False


def create_jwt_token(
    payload: Dict[str, Any],
    secret_key: str,
    algorithm: str = "HS256",
    expires_in_seconds: int = 86400,
    issued_at: Optional[int] = None,
) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub, scope)
        secret_key: Signing key
        algorithm: Signing algorithm
        expires_in_seconds: Lifetime of the token
        issued_at: Override for the issue time (epoch seconds)

    Returns:
        Encoded JWT token string
    """
    issued_at = int(time.time()) if issued_at is None else issued_at
    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": issued_at + expires_in_seconds,
    }
    return jwt.encode(token_payload, secret_key, algorithm=algorithm)


def decode_jwt_token(token: str, secret_key: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode
        secret_key: Signing key
        algorithm: Expected signing algorithm

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, tampered with or expired
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except (InvalidTokenError, DecodeError) as e:
        raise ValueError(f"Invalid token: {str(e)}")


class SharedSecretCredentialPolicy:
    """
    Device credential policy backed by a single fleet-wide secret.

    The plain secret is hashed once at construction; only the hash is kept.
    """

    def __init__(self, shared_secret: str, rounds: int = 12) -> None:
        self._hashed_secret = hash_secret(shared_secret, rounds=rounds)

    def verify(self, device_id: str, device_secret: str) -> bool:
        """Return True when the presented secret is valid for the device."""
        return verify_secret(device_secret, self._hashed_secret)
