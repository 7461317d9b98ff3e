from typing import TYPE_CHECKING
from ...application.services import ConfigurationStore
from ...application.use_cases.config.get_config import GetConfigUseCase
from ...application.use_cases.config.update_config import UpdateConfigUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ConfigProvider:
    """Configuration use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetConfigUseCase,
            lambda: GetConfigUseCase(configuration_store=container.get(ConfigurationStore))
        )
        container.register_factory(
            UpdateConfigUseCase,
            lambda: UpdateConfigUseCase(configuration_store=container.get(ConfigurationStore))
        )
