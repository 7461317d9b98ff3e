# Local application imports
from ...services.event_intake import EventIntake
from ...dto.event_dto import EventListItemResponse, EventListResponse


class ListRecentEventsUseCase:
    """Use case for the dashboard's most recent events"""

    def __init__(self, event_intake: EventIntake, limit: int = 50) -> None:
        self.event_intake = event_intake
        self.limit = limit

    async def execute(self) -> EventListResponse:
        events = await self.event_intake.recent(self.limit)
        return EventListResponse(
            events=[
                EventListItemResponse(
                    event_id=event.id,
                    device_id=event.device_id,
                    event_type=event.event_type,
                    severity=event.severity,
                    timestamp=event.timestamp,
                    received_at=event.received_at,
                    location=event.location,
                    processed=event.processed,
                    acknowledged=event.acknowledged,
                    metadata=event.metadata,
                )
                for event in events
            ],
            total_events=await self.event_intake.count(),
            recent_events=len(events),
        )
