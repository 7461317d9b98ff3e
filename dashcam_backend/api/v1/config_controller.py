# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.auth_dto import AuthenticatedDevice
from ...application.dto.common_dto import ApiResponse
from ...application.dto.config_dto import ConfigUpdateRequest, ConfigUpdateResponse, DeviceConfigResponse
from ...application.use_cases.config.get_config import GetConfigUseCase
from ...application.use_cases.config.update_config import UpdateConfigUseCase
from ...di.container import get_container
from .dependencies import require_read, require_write


router = APIRouter(tags=["configuration"])


@router.get("", response_model=ApiResponse[DeviceConfigResponse])
async def get_config(
    current_device: AuthenticatedDevice = Depends(require_read),
) -> ApiResponse[DeviceConfigResponse]:
    """
    Get the calling device's configuration

    The default document is created on first read.
    """
    container = get_container()
    get_config_use_case = container.get(GetConfigUseCase)

    config = await get_config_use_case.execute(current_device.device_id)
    return ApiResponse[DeviceConfigResponse](data=config)


@router.put("", response_model=ApiResponse[ConfigUpdateResponse])
async def update_config(
    request: ConfigUpdateRequest,
    current_device: AuthenticatedDevice = Depends(require_write),
) -> ApiResponse[ConfigUpdateResponse]:
    """
    Merge top-level keys into the calling device's configuration

    Args:
        request: Partial configuration document
        current_device: Authenticated device (from dependency)

    Returns:
        New configuration version and update time
    """
    container = get_container()
    update_config_use_case = container.get(UpdateConfigUseCase)

    updated = await update_config_use_case.execute(current_device.device_id, request)
    return ApiResponse[ConfigUpdateResponse](
        data=updated,
        message="Configuration updated successfully",
    )
