"""
Error taxonomy for the dashcam coordinator.

Every core operation either returns a value or raises exactly one of the
exceptions below. Each carries a stable wire ``code`` and the HTTP status the
API layer answers with.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class DashcamError(Exception):
    """Base exception for all coordinator errors."""

    code = "SERVER_ERROR"
    http_status = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Caller errors
# -----------------------------------------------------------------------------


class ValidationError(DashcamError):
    """Required input missing or malformed."""

    code = "VALIDATION_ERROR"
    http_status = 400


class NotFoundError(DashcamError):
    """Referenced command or resource identity is unknown."""

    code = "NOT_FOUND"
    http_status = 404


class InvalidStateError(DashcamError):
    """Operation attempted against an entity not in the required lifecycle state."""

    code = "INVALID_STATE"
    http_status = 409

    def __init__(
        self,
        message: str,
        current_state: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.current_state = current_state


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class AuthRequiredError(DashcamError):
    """No credential presented."""

    code = "AUTH_REQUIRED"
    http_status = 401


class AuthInvalidError(DashcamError):
    """Credential present but unverifiable, expired, or for an unknown device."""

    code = "AUTH_INVALID"
    http_status = 401


class InsufficientScopeError(AuthInvalidError):
    """Credential is valid but lacks the capability the operation needs."""

    http_status = 403


# -----------------------------------------------------------------------------
# Internal
# -----------------------------------------------------------------------------


class ServerError(DashcamError):
    """Unexpected internal fault."""
    pass
