# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Application
        self.environment: Final[str] = os.getenv("ENVIRONMENT", "development")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        self.server_base_url: Final[str] = os.getenv("SERVER_BASE_URL", "http://localhost:8000")
        self.allowed_origins: Final[List[str]] = _split_csv(os.getenv("ALLOWED_ORIGINS", "*"))

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_json: Final[bool] = os.getenv("LOG_JSON", "false").lower() == "true"

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_seconds: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_SECONDS", "86400")
        )

        # Device credential policy
        self.device_shared_secret: Final[str] = os.getenv("DEVICE_SHARED_SECRET", "test-secret")
        self.device_type: Final[str] = os.getenv("DEVICE_TYPE", "dashcam")
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))

        # Device registry
        self.device_online_window_seconds: Final[int] = int(
            os.getenv("DEVICE_ONLINE_WINDOW_SECONDS", "300")
        )

        # Command queue
        self.default_command_timeout_seconds: Final[int] = int(
            os.getenv("DEFAULT_COMMAND_TIMEOUT_SECONDS", "30")
        )
        self.command_sweep_interval_seconds: Final[float] = float(
            os.getenv("COMMAND_SWEEP_INTERVAL_SECONDS", "15")
        )

        # Event intake
        self.emergency_severity_threshold: Final[float] = float(
            os.getenv("EMERGENCY_SEVERITY_THRESHOLD", "0.8")
        )
        self.emergency_contact_id: Final[str] = os.getenv(
            "EMERGENCY_CONTACT_ID", "emergency-contact-123"
        )

        # Dashboard
        self.dashboard_recent_limit: Final[int] = int(os.getenv("DASHBOARD_RECENT_LIMIT", "50"))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
