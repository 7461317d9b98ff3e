# External package imports
from fastapi import APIRouter, Depends, Request

# Local application imports
from ...application.dto.auth_dto import AuthenticatedDevice
from ...application.dto.common_dto import ApiResponse
from ...application.dto.heartbeat_dto import HeartbeatRequest, HeartbeatResponse
from ...application.use_cases.heartbeat.process_heartbeat import ProcessHeartbeatUseCase
from ...di.container import get_container
from .dependencies import client_ip, require_read


router = APIRouter(tags=["heartbeat"])


@router.post("", response_model=ApiResponse[HeartbeatResponse])
async def heartbeat(
    request: HeartbeatRequest,
    http_request: Request,
    current_device: AuthenticatedDevice = Depends(require_read),
) -> ApiResponse[HeartbeatResponse]:
    """
    Record device liveness and hand out its pending commands

    Every command in the response is marked sent and will not be delivered again.
    """
    container = get_container()
    heartbeat_use_case = container.get(ProcessHeartbeatUseCase)

    result = await heartbeat_use_case.execute(
        current_device.device_id,
        request,
        ip_address=client_ip(http_request),
    )
    return ApiResponse[HeartbeatResponse](data=result)
