"""
Unit tests for dashcam_backend.core.security
"""
import time

import pytest
from dashcam_backend.core.security import (
    SharedSecretCredentialPolicy,
    create_jwt_token,
    decode_jwt_token,
    hash_secret,
    verify_secret,
)

SECRET_KEY = "unit-test-signing-key"


class TestHashSecret:
    """Tests for hash_secret"""

    def test_returns_non_empty_string(self):
        result = hash_secret("mysecret", rounds=4)
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_secret("same", rounds=4)
        h2 = hash_secret("same", rounds=4)
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_secret("secret123", rounds=4)
        assert result != "secret123"


class TestVerifySecret:
    """Tests for verify_secret"""

    def test_matching_secret_returns_true(self):
        hashed = hash_secret("correct", rounds=4)
        assert verify_secret("correct", hashed) is True

    def test_wrong_secret_returns_false(self):
        hashed = hash_secret("correct", rounds=4)
        assert verify_secret("wrong", hashed) is False

    def test_garbage_hash_returns_false(self):
        assert verify_secret("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self):
        payload = {"sub": "cam-1", "scope": ["read"]}
        token = create_jwt_token(payload, SECRET_KEY)
        decoded = decode_jwt_token(token, SECRET_KEY)
        assert decoded["sub"] == "cam-1"
        assert decoded["scope"] == ["read"]
        assert decoded["exp"] - decoded["iat"] == 86400

    def test_decode_invalid_token_raises(self):
        with pytest.raises(ValueError) as exc_info:
            decode_jwt_token("invalid.jwt.token", SECRET_KEY)
        assert "Invalid token" in str(exc_info.value)

    def test_decode_tampered_token_raises(self):
        token = create_jwt_token({"sub": "cam-1"}, SECRET_KEY)
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(ValueError):
            decode_jwt_token(tampered, SECRET_KEY)

    def test_decode_with_wrong_key_raises(self):
        token = create_jwt_token({"sub": "cam-1"}, SECRET_KEY)
        with pytest.raises(ValueError):
            decode_jwt_token(token, "another-key")

    def test_expired_token_raises(self):
        token = create_jwt_token(
            {"sub": "cam-1"},
            SECRET_KEY,
            expires_in_seconds=60,
            issued_at=int(time.time()) - 3600,
        )
        with pytest.raises(ValueError):
            decode_jwt_token(token, SECRET_KEY)


class TestSharedSecretCredentialPolicy:

    def test_accepts_fleet_secret_for_any_device(self):
        policy = SharedSecretCredentialPolicy("fleet-secret", rounds=4)
        assert policy.verify("cam-1", "fleet-secret") is True
        assert policy.verify("cam-2", "fleet-secret") is True

    def test_rejects_other_secrets(self):
        policy = SharedSecretCredentialPolicy("fleet-secret", rounds=4)
        assert policy.verify("cam-1", "guess") is False
