# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import AuthenticatedDevice
from ...application.dto.common_dto import ApiResponse
from ...application.dto.media_dto import MediaRegisterRequest, MediaRegisterResponse, MediaStatusResponse
from ...application.use_cases.media.register_media import RegisterMediaUseCase
from ...application.use_cases.media.get_media_status import GetMediaStatusUseCase
from ...di.container import get_container
from .dependencies import require_read, require_upload


router = APIRouter(tags=["media"])


@router.post("", response_model=ApiResponse[MediaRegisterResponse], status_code=status.HTTP_201_CREATED)
async def register_media(
    request: MediaRegisterRequest,
    current_device: AuthenticatedDevice = Depends(require_upload),
) -> ApiResponse[MediaRegisterResponse]:
    """
    Record a file the device already wrote to the blob store

    The bytes never pass through this service; only metadata is kept.
    """
    container = get_container()
    register_media_use_case = container.get(RegisterMediaUseCase)

    media_file = await register_media_use_case.execute(current_device.device_id, request)
    return ApiResponse[MediaRegisterResponse](data=media_file)


@router.get("/{file_id}/status", response_model=ApiResponse[MediaStatusResponse])
async def get_media_status(
    file_id: str,
    current_device: AuthenticatedDevice = Depends(require_read),
) -> ApiResponse[MediaStatusResponse]:
    container = get_container()
    media_status_use_case = container.get(GetMediaStatusUseCase)

    media_file = await media_status_use_case.execute(file_id)
    return ApiResponse[MediaStatusResponse](data=media_file)
