"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify app package can be imported."""
    from dashcam_backend.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert settings.bcrypt_rounds == 4
    assert settings.command_sweep_interval_seconds == 0


def test_container_resolves_use_cases():
    from dashcam_backend.application.use_cases import ProcessHeartbeatUseCase
    from dashcam_backend.di.container import get_container

    assert isinstance(get_container().get(ProcessHeartbeatUseCase), ProcessHeartbeatUseCase)
