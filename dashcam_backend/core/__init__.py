from .config import Settings, get_settings
from .security import (
    hash_secret,
    verify_secret,
    create_jwt_token,
    decode_jwt_token,
    SharedSecretCredentialPolicy,
)

__all__ = [
    "Settings",
    "get_settings",
    "hash_secret",
    "verify_secret",
    "create_jwt_token",
    "decode_jwt_token",
    "SharedSecretCredentialPolicy",
]
