"""
Shared pytest fixtures for dashcam backend tests.
"""
from datetime import datetime, timezone

import pytest

from dashcam_backend.core.config import reset_settings
from dashcam_backend.core.security import SharedSecretCredentialPolicy
from dashcam_backend.di.container import reset_container
from dashcam_backend.infrastructure.memory import (
    InMemoryCommandRepository,
    InMemoryConfigurationRepository,
    InMemoryDeviceRepository,
    InMemoryEventRepository,
    InMemoryMediaFileRepository,
)
from dashcam_backend.application.services import (
    CommandQueue,
    ConfigurationStore,
    DeviceRegistry,
    EventIntake,
    HeartbeatCoordinator,
    TokenService,
    emergency_contact_rule,
)

TEST_JWT_SECRET = "test_secret_key_for_testing_only"
TEST_DEVICE_SECRET = "test-secret"
TEST_BASE_URL = "http://testserver"


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Test environment: fast bcrypt, fixed signing key, no background sweep.

    Settings and the DI container are rebuilt per test so state never leaks.
    """
    env_vars = {
        "ENVIRONMENT": "test",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "DEVICE_SHARED_SECRET": TEST_DEVICE_SECRET,
        "BCRYPT_ROUNDS": "4",
        "COMMAND_SWEEP_INTERVAL_SECONDS": "0",
        "SERVER_BASE_URL": TEST_BASE_URL,
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    reset_settings()
    reset_container()
    yield env_vars
    reset_settings()
    reset_container()


@pytest.fixture
def fixed_now():
    return datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def device_repository():
    return InMemoryDeviceRepository()


@pytest.fixture
def command_repository():
    return InMemoryCommandRepository()


@pytest.fixture
def configuration_repository():
    return InMemoryConfigurationRepository()


@pytest.fixture
def event_repository():
    return InMemoryEventRepository()


@pytest.fixture
def media_file_repository():
    return InMemoryMediaFileRepository()


@pytest.fixture
def device_registry(device_repository):
    return DeviceRegistry(device_repository)


@pytest.fixture
def command_queue(command_repository):
    return CommandQueue(command_repository, default_timeout_seconds=30)


@pytest.fixture
def configuration_store(configuration_repository):
    return ConfigurationStore(configuration_repository, server_base_url=TEST_BASE_URL)


@pytest.fixture
def event_intake(event_repository):
    return EventIntake(
        event_repository,
        action_rules=[emergency_contact_rule(0.8, "emergency-contact-123")],
    )


@pytest.fixture
def heartbeat_coordinator(device_registry, command_queue):
    return HeartbeatCoordinator(device_registry, command_queue)


@pytest.fixture
def token_service(device_registry):
    return TokenService(
        secret_key=TEST_JWT_SECRET,
        credential_policy=SharedSecretCredentialPolicy(TEST_DEVICE_SECRET, rounds=4),
        device_registry=device_registry,
    )


@pytest.fixture
def client():
    """TestClient over the real application with a fresh container"""
    from fastapi.testclient import TestClient
    from dashcam_backend.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def authenticate(client):
    """Authenticate a device through the API and return its bearer headers"""

    def _authenticate(device_id: str = "cam-1", **device_info) -> dict:
        response = client.post(
            "/api/v1/auth/token",
            json={
                "deviceId": device_id,
                "deviceSecret": TEST_DEVICE_SECRET,
                "deviceInfo": device_info or {"model": "DC-100"},
            },
        )
        assert response.status_code == 200, response.text
        token = response.json()["data"]["accessToken"]
        return {"Authorization": f"Bearer {token}"}

    return _authenticate
