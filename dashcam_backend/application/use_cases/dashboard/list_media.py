# Local application imports
from ....domain.repositories.media_file_repository import MediaFileRepository
from ...dto.media_dto import MediaListItemResponse, MediaListResponse


class ListRecentMediaUseCase:
    """Use case for the dashboard's most recently uploaded media"""

    def __init__(self, media_file_repository: MediaFileRepository, limit: int = 50) -> None:
        self.media_file_repository = media_file_repository
        self.limit = limit

    async def execute(self) -> MediaListResponse:
        files = await self.media_file_repository.list_recent(self.limit)
        total_size = await self.media_file_repository.total_size()
        return MediaListResponse(
            media_files=[
                MediaListItemResponse(
                    file_id=media_file.id,
                    device_id=media_file.device_id,
                    file_name=media_file.file_name,
                    file_type=media_file.file_type,
                    media_type=media_file.media_type,
                    file_size=media_file.file_size,
                    mime_type=media_file.mime_type,
                    storage_url=media_file.storage_url,
                    uploaded_at=media_file.uploaded_at,
                    timestamp=media_file.timestamp,
                    duration=media_file.duration,
                    camera_id=media_file.camera_id,
                )
                for media_file in files
            ],
            total_files=await self.media_file_repository.count(),
            total_size=total_size,
            total_size_mb=round(total_size / 1024 / 1024, 2),
        )
