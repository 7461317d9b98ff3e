# Local application imports
from ....domain.repositories.media_file_repository import MediaFileRepository
from ....domain.exceptions import NotFoundError
from ...dto.media_dto import MediaStatusResponse
from .register_media import public_url


class GetMediaStatusUseCase:
    """Use case for looking up a media file record"""

    def __init__(self, media_file_repository: MediaFileRepository, server_base_url: str) -> None:
        self.media_file_repository = media_file_repository
        self.server_base_url = server_base_url

    async def execute(self, file_id: str) -> MediaStatusResponse:
        """
        Raises:
            NotFoundError: If no record exists for file_id
        """
        media_file = await self.media_file_repository.find_by_id(file_id)
        if media_file is None:
            raise NotFoundError("Media file not found")

        return MediaStatusResponse(
            file_id=media_file.id,
            status="processed" if media_file.processing_status == "completed" else "received",
            upload_status=media_file.upload_status,
            processing_status=media_file.processing_status,
            file_size=media_file.file_size,
            uploaded_at=media_file.uploaded_at,
            download_url=public_url(media_file.storage_url, self.server_base_url),
        )
