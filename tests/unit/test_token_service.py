"""
Unit tests for TokenService: issue, verify and refresh.
"""
import time
from unittest.mock import MagicMock

import pytest
from dashcam_backend.application.services.token_service import (
    DEFAULT_SCOPE,
    TokenService,
    build_refresh_handle,
    parse_refresh_handle,
)
from dashcam_backend.domain.exceptions import AuthInvalidError, AuthRequiredError, ValidationError


class TestRefreshHandle:

    def test_handle_format(self, fixed_now):
        handle = build_refresh_handle("cam-1", fixed_now)
        assert handle == f"refresh-cam-1-{int(fixed_now.timestamp() * 1000)}"

    def test_device_id_with_dashes_survives(self):
        assert parse_refresh_handle(build_refresh_handle("fleet-a-cam-7")) == "fleet-a-cam-7"

    @pytest.mark.parametrize("handle", ["", "cam-1-123", "refresh-cam-x", "refresh--abc"])
    def test_malformed_handle(self, handle):
        assert parse_refresh_handle(handle) is None


class TestIssue:

    @pytest.mark.asyncio
    async def test_issue_registers_device(self, token_service, device_registry):
        credential = await token_service.issue("cam-1", "test-secret", device_info={"model": "DC-100"})

        assert credential.device_id == "cam-1"
        assert credential.expires_in == 86400
        assert credential.token_type == "Bearer"
        assert credential.refresh_token.startswith("refresh-cam-1-")
        assert credential.scope == DEFAULT_SCOPE

        device = await device_registry.get("cam-1")
        assert device is not None
        assert device.device_info == {"model": "DC-100"}

    @pytest.mark.asyncio
    async def test_wrong_secret_is_rejected(self, token_service, device_registry):
        with pytest.raises(AuthInvalidError):
            await token_service.issue("cam-1", "nope")
        assert await device_registry.exists("cam-1") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("device_id, secret", [(None, "test-secret"), ("cam-1", None), ("", "")])
    async def test_missing_fields(self, token_service, device_id, secret):
        with pytest.raises(ValidationError):
            await token_service.issue(device_id, secret)

    def test_signing_key_required(self, device_registry):
        with pytest.raises(ValueError):
            TokenService(secret_key="", credential_policy=MagicMock(), device_registry=device_registry)


class TestVerify:

    @pytest.mark.asyncio
    async def test_round_trip(self, token_service):
        credential = await token_service.issue("cam-1", "test-secret")
        identity = token_service.verify(credential.access_token)

        assert identity.device_id == "cam-1"
        assert identity.device_type == "dashcam"
        assert identity.has_scope("write")

    def test_missing_token(self, token_service):
        with pytest.raises(AuthRequiredError):
            token_service.verify(None)
        with pytest.raises(AuthRequiredError):
            token_service.verify("")

    def test_expired_token(self, token_service):
        token = token_service.create_access_token("cam-1", issued_at=int(time.time()) - 2 * 86400)
        with pytest.raises(AuthInvalidError):
            token_service.verify(token)

    def test_corrupted_token(self, token_service):
        token = token_service.create_access_token("cam-1")
        with pytest.raises(AuthInvalidError):
            token_service.verify(token[:-4] + "abcd")

    def test_token_from_another_key(self, token_service, device_registry):
        other = TokenService(
            secret_key="some-other-key",
            credential_policy=MagicMock(),
            device_registry=device_registry,
        )
        with pytest.raises(AuthInvalidError):
            token_service.verify(other.create_access_token("cam-1"))

    def test_verify_does_not_consult_registry(self, token_service, device_registry):
        # Never registered, but the signature is good
        identity = token_service.verify(token_service.create_access_token("ghost-cam"))
        assert identity.device_id == "ghost-cam"


class TestRefresh:

    @pytest.mark.asyncio
    async def test_refresh_known_device(self, token_service):
        credential = await token_service.issue("cam-1", "test-secret")
        refreshed = await token_service.refresh(credential.refresh_token)

        assert refreshed.device_id == "cam-1"
        assert refreshed.refresh_token is None
        assert token_service.verify(refreshed.access_token).device_id == "cam-1"

    @pytest.mark.asyncio
    async def test_refresh_unknown_device(self, token_service):
        with pytest.raises(AuthInvalidError):
            await token_service.refresh(build_refresh_handle("never-seen"))

    @pytest.mark.asyncio
    async def test_refresh_malformed_handle(self, token_service):
        with pytest.raises(AuthInvalidError):
            await token_service.refresh("garbage")

    @pytest.mark.asyncio
    async def test_refresh_missing_handle(self, token_service):
        with pytest.raises(ValidationError):
            await token_service.refresh(None)
