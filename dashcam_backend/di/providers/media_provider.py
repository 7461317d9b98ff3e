from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.media_file_repository import MediaFileRepository
from ...application.use_cases.media.register_media import RegisterMediaUseCase
from ...application.use_cases.media.get_media_status import GetMediaStatusUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MediaProvider:
    """Media metadata use case provider"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        container.register_factory(
            RegisterMediaUseCase,
            lambda: RegisterMediaUseCase(
                media_file_repository=container.get(MediaFileRepository),
                server_base_url=settings.server_base_url,
            )
        )
        container.register_factory(
            GetMediaStatusUseCase,
            lambda: GetMediaStatusUseCase(
                media_file_repository=container.get(MediaFileRepository),
                server_base_url=settings.server_base_url,
            )
        )
