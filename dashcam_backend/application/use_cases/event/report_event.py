# Standard library imports
from typing import Optional

# Local application imports
from ...services.event_intake import EventIntake
from ...dto.event_dto import EventReportRequest, EventReportResponse, EventActionResponse


class ReportEventUseCase:
    """Use case for a device reporting a telemetry or safety event"""

    def __init__(self, event_intake: EventIntake) -> None:
        self.event_intake = event_intake

    async def execute(
        self,
        device_id: str,
        request: EventReportRequest,
        ip_address: Optional[str] = None,
    ) -> EventReportResponse:
        """
        Store an event and derive follow-up actions

        Raises:
            ValidationError: If event type or timestamp is missing
        """
        event = await self.event_intake.record(
            device_id,
            request.event_type,
            request.timestamp,
            severity=request.severity,
            location=request.location,
            event_id=request.event_id,
            metadata=request.model_extra,
            ip_address=ip_address,
        )
        actions = self.event_intake.derive_actions(event)
        return EventReportResponse(
            event_id=event.id,
            acknowledged=event.acknowledged,
            actions=[EventActionResponse(type=action.type, parameters=action.parameters) for action in actions],
        )
