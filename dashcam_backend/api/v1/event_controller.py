# External package imports
from fastapi import APIRouter, Depends, Request, status

# Local application imports
from ...application.dto.auth_dto import AuthenticatedDevice
from ...application.dto.common_dto import ApiResponse
from ...application.dto.event_dto import EventReportRequest, EventReportResponse
from ...application.use_cases.event.report_event import ReportEventUseCase
from ...di.container import get_container
from .dependencies import client_ip, require_read


router = APIRouter(tags=["events"])


@router.post("", response_model=ApiResponse[EventReportResponse], status_code=status.HTTP_201_CREATED)
async def report_event(
    request: EventReportRequest,
    http_request: Request,
    current_device: AuthenticatedDevice = Depends(require_read),
) -> ApiResponse[EventReportResponse]:
    """
    Store a device event and return any follow-up actions

    Args:
        request: Event type, timestamp, severity and any extra fields
        http_request: Raw request, for the caller's address
        current_device: Reporting device (from dependency)

    Returns:
        Event ID, acknowledgement and derived actions
    """
    container = get_container()
    report_event_use_case = container.get(ReportEventUseCase)

    event = await report_event_use_case.execute(
        current_device.device_id,
        request,
        ip_address=client_ip(http_request),
    )
    return ApiResponse[EventReportResponse](data=event)
