from .common_dto import CamelModel, ApiResponse, ErrorBody, ErrorResponse
from .auth_dto import (
    DeviceAuthRequest,
    DeviceTokenResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
    AuthenticatedDevice,
)
from .config_dto import ConfigUpdateRequest, ConfigUpdateResponse, DeviceConfigResponse
from .heartbeat_dto import HeartbeatRequest, HeartbeatResponse, CommandSummaryResponse
from .command_dto import (
    CommandCreateRequest,
    CommandCreateResponse,
    CommandStatusResponse,
    CommandResultRequest,
    CommandResultResponse,
    CommandHistoryItem,
    CommandHistoryResponse,
)
from .event_dto import EventReportRequest, EventReportResponse, EventActionResponse, EventListResponse
from .media_dto import MediaRegisterRequest, MediaRegisterResponse, MediaStatusResponse, MediaListResponse
from .device_dto import DeviceResponse, DeviceListResponse
from .dashboard_dto import DashboardOverviewResponse

__all__ = [
    "CamelModel",
    "ApiResponse",
    "ErrorBody",
    "ErrorResponse",
    "DeviceAuthRequest",
    "DeviceTokenResponse",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "AuthenticatedDevice",
    "ConfigUpdateRequest",
    "ConfigUpdateResponse",
    "DeviceConfigResponse",
    "HeartbeatRequest",
    "HeartbeatResponse",
    "CommandSummaryResponse",
    "CommandCreateRequest",
    "CommandCreateResponse",
    "CommandStatusResponse",
    "CommandResultRequest",
    "CommandResultResponse",
    "CommandHistoryItem",
    "CommandHistoryResponse",
    "EventReportRequest",
    "EventReportResponse",
    "EventActionResponse",
    "EventListResponse",
    "MediaRegisterRequest",
    "MediaRegisterResponse",
    "MediaStatusResponse",
    "MediaListResponse",
    "DeviceResponse",
    "DeviceListResponse",
    "DashboardOverviewResponse",
]
