from typing import TYPE_CHECKING
from ...application.services import EventIntake
from ...application.use_cases.event.report_event import ReportEventUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventProvider:
    """Event use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ReportEventUseCase,
            lambda: ReportEventUseCase(event_intake=container.get(EventIntake))
        )
