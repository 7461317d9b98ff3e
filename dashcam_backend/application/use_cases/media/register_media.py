# Standard library imports
import logging
import uuid
from urllib.parse import urlsplit

# Local application imports
from ....domain.models.media_file import MediaFile
from ....domain.repositories.media_file_repository import MediaFileRepository
from ....domain.constants import media_constants
from ....domain.exceptions import ValidationError
from ....utils.datetime_utils import ensure_utc, utc_now
from ...dto.media_dto import MediaRegisterRequest, MediaRegisterResponse

logger = logging.getLogger(__name__)


def public_url(storage_url: str, server_base_url: str) -> str:
    """Absolute URL for a blob; schemeless storage paths are served from the API host"""
    if urlsplit(storage_url).scheme:
        return storage_url
    return f"{server_base_url.rstrip('/')}/{storage_url.lstrip('/')}"


class RegisterMediaUseCase:
    """Use case for recording a media file the device uploaded to the blob store"""

    def __init__(self, media_file_repository: MediaFileRepository, server_base_url: str) -> None:
        self.media_file_repository = media_file_repository
        self.server_base_url = server_base_url

    async def execute(self, device_id: str, request: MediaRegisterRequest) -> MediaRegisterResponse:
        """
        Record media metadata

        Args:
            device_id: Uploading device
            request: Blob location and file metadata

        Returns:
            MediaRegisterResponse with the file ID and public URL

        Raises:
            ValidationError: If required metadata is missing or the file type is not allowed
        """
        if not request.file_name or not request.storage_url:
            raise ValidationError("File name and storage URL are required")
        if request.file_size is None or request.file_size < 0:
            raise ValidationError("File size is required")
        if request.file_size > media_constants.MAX_FILE_SIZE_BYTES:
            raise ValidationError("File size exceeds limit (100MB)")
        mime_type = request.mime_type or ""
        if not mime_type.startswith(media_constants.ALLOWED_MIME_PREFIXES):
            raise ValidationError("Only video and image files are allowed")
        if request.file_type and request.file_type not in media_constants.FILE_TYPES:
            raise ValidationError("File type must be video or image")

        default_file_type = (
            media_constants.FILE_TYPE_VIDEO
            if mime_type.startswith("video/")
            else media_constants.FILE_TYPE_IMAGE
        )
        now = utc_now()
        media_file = MediaFile(
            id=str(uuid.uuid4()),
            device_id=device_id,
            file_name=request.file_name,
            storage_url=request.storage_url,
            file_size=request.file_size,
            mime_type=mime_type,
            file_type=request.file_type or default_file_type,
            media_type=request.media_type or media_constants.DEFAULT_MEDIA_TYPE,
            uploaded_at=now,
            timestamp=ensure_utc(request.timestamp) or now,
            duration=request.duration,
            checksum=request.checksum,
            camera_id=request.camera_id or 0,
            location=request.location,
            upload_status=media_constants.UPLOAD_STATUS_COMPLETED,
            processing_status=media_constants.PROCESSING_STATUS_QUEUED,
        )
        saved = await self.media_file_repository.save(media_file)

        logger.info(
            f"Media uploaded: {saved.file_name} ({saved.file_size / 1024 / 1024:.2f}MB) "
            f"from device {device_id}"
        )
        return MediaRegisterResponse(
            file_id=saved.id,
            upload_url=public_url(saved.storage_url, self.server_base_url),
            processing_status=saved.processing_status,
            file_size=saved.file_size,
            mime_type=saved.mime_type,
        )
