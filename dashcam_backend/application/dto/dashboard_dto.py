from typing import Dict

from pydantic import Field

from .common_dto import CamelModel


class ServerInfo(CamelModel):
    status: str = "running"
    uptime: float
    environment: str
    version: str


class DashboardStatistics(CamelModel):
    total_devices: int = 0
    online_devices: int = 0
    total_events: int = 0
    total_media_files: int = 0
    total_commands: int = 0
    commands_by_status: Dict[str, int] = Field(default_factory=dict)


class DashboardOverviewResponse(CamelModel):
    server: ServerInfo
    statistics: DashboardStatistics
