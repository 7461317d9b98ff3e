# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query

# Local application imports
from ...application.dto.common_dto import ApiResponse
from ...application.dto.command_dto import CommandHistoryResponse
from ...application.dto.dashboard_dto import DashboardOverviewResponse
from ...application.dto.device_dto import DeviceListResponse
from ...application.dto.event_dto import EventListResponse
from ...application.dto.media_dto import MediaListResponse
from ...application.use_cases.dashboard import (
    GetDashboardOverviewUseCase,
    ListDevicesUseCase,
    ListRecentEventsUseCase,
    ListRecentMediaUseCase,
    ListCommandHistoryUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["dashboard"])


@router.get("", response_model=ApiResponse[DashboardOverviewResponse])
async def dashboard_overview() -> ApiResponse[DashboardOverviewResponse]:
    """Server info and fleet statistics"""
    overview = await get_container().get(GetDashboardOverviewUseCase).execute()
    return ApiResponse[DashboardOverviewResponse](data=overview)


@router.get("/devices", response_model=ApiResponse[DeviceListResponse])
async def dashboard_devices() -> ApiResponse[DeviceListResponse]:
    """Every known device with its derived online state"""
    devices = await get_container().get(ListDevicesUseCase).execute()
    return ApiResponse[DeviceListResponse](data=devices)


@router.get("/events", response_model=ApiResponse[EventListResponse])
async def dashboard_events() -> ApiResponse[EventListResponse]:
    events = await get_container().get(ListRecentEventsUseCase).execute()
    return ApiResponse[EventListResponse](data=events)


@router.get("/media", response_model=ApiResponse[MediaListResponse])
async def dashboard_media() -> ApiResponse[MediaListResponse]:
    media_files = await get_container().get(ListRecentMediaUseCase).execute()
    return ApiResponse[MediaListResponse](data=media_files)


@router.get("/commands", response_model=ApiResponse[CommandHistoryResponse])
async def dashboard_commands(
    device_id: Optional[str] = Query(default=None, alias="deviceId"),
) -> ApiResponse[CommandHistoryResponse]:
    """Command history, newest first, optionally for one device"""
    history = await get_container().get(ListCommandHistoryUseCase).execute(device_id)
    return ApiResponse[CommandHistoryResponse](data=history)
