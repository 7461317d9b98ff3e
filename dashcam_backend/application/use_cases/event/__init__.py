from .report_event import ReportEventUseCase

__all__ = ["ReportEventUseCase"]
