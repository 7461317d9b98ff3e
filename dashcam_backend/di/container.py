# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    RepositoryProvider,
    ServiceProvider,
    AuthProvider,
    ConfigProvider,
    HeartbeatProvider,
    CommandProvider,
    EventProvider,
    MediaProvider,
    DashboardProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Repositories (RepositoryProvider)
    2. Domain services (ServiceProvider) - depend on repositories and settings
    3. Use cases (AuthProvider, CommandProvider, ...) - depend on services
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: repositories → services → use cases
        """
        self.register_singleton(Settings, self.settings)

        # Step 1: In-memory stores
        RepositoryProvider.register(self)

        # Step 2: Services shared by every request
        ServiceProvider.register(self, self.settings)

        # Step 3: Use cases
        AuthProvider.register(self)
        ConfigProvider.register(self)
        HeartbeatProvider.register(self)
        CommandProvider.register(self)
        EventProvider.register(self)
        MediaProvider.register(self, self.settings)
        DashboardProvider.register(self, self.settings)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Discard the global container; the next get_container() starts with empty stores."""
    global _container
    _container = None
