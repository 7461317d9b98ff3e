# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import AuthenticatedDevice
from ...application.dto.common_dto import ApiResponse
from ...application.dto.command_dto import (
    CommandCreateRequest,
    CommandCreateResponse,
    CommandResultRequest,
    CommandResultResponse,
    CommandStatusResponse,
)
from ...application.use_cases.command.enqueue_command import EnqueueCommandUseCase
from ...application.use_cases.command.get_command_status import GetCommandStatusUseCase
from ...application.use_cases.command.report_command_result import ReportCommandResultUseCase
from ...di.container import get_container
from .dependencies import require_read, require_write


router = APIRouter(tags=["commands"])


@router.post(
    "/{device_id}",
    response_model=ApiResponse[CommandCreateResponse],
    status_code=status.HTTP_201_CREATED,
)
async def enqueue_command(
    device_id: str,
    request: CommandCreateRequest,
    current_device: AuthenticatedDevice = Depends(require_write),
) -> ApiResponse[CommandCreateResponse]:
    """
    Queue a command for a device

    Args:
        device_id: Target device; it does not need to have connected yet
        request: Command type, parameters, priority and timeout
        current_device: Issuing device (from dependency)

    Returns:
        The queued command's ID and an execution estimate
    """
    container = get_container()
    enqueue_use_case = container.get(EnqueueCommandUseCase)

    command = await enqueue_use_case.execute(device_id, request, created_by=current_device.device_id)
    return ApiResponse[CommandCreateResponse](data=command)


@router.get("/{command_id}/status", response_model=ApiResponse[CommandStatusResponse])
async def get_command_status(
    command_id: str,
    current_device: AuthenticatedDevice = Depends(require_read),
) -> ApiResponse[CommandStatusResponse]:
    container = get_container()
    status_use_case = container.get(GetCommandStatusUseCase)

    command = await status_use_case.execute(command_id)
    return ApiResponse[CommandStatusResponse](data=command)


@router.post("/{command_id}/result", response_model=ApiResponse[CommandResultResponse])
async def report_command_result(
    command_id: str,
    request: CommandResultRequest,
    current_device: AuthenticatedDevice = Depends(require_read),
) -> ApiResponse[CommandResultResponse]:
    """
    Record the outcome of a delivered command

    Only the command's target device may report on it.
    """
    container = get_container()
    report_use_case = container.get(ReportCommandResultUseCase)

    result = await report_use_case.execute(command_id, current_device.device_id, request)
    return ApiResponse[CommandResultResponse](data=result)
