from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common_dto import CamelModel


class CommandCreateRequest(CamelModel):
    """DTO for enqueueing a command"""
    command_type: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None
    priority: Optional[str] = None
    timeout: Optional[int] = None


class CommandCreateResponse(CamelModel):
    """DTO returned once a command is queued"""
    command_id: str
    status: str
    estimated_execution_time: datetime


class CommandStatusResponse(CamelModel):
    """DTO for command status lookup"""
    command_id: str
    status: str
    result: Optional[Dict[str, Any]] = None
    created_at: datetime
    sent_at: Optional[datetime] = None
    executed_at: Optional[datetime] = None


class CommandResultRequest(CamelModel):
    """DTO for a device reporting a command outcome"""
    success: bool = True
    result: Optional[Dict[str, Any]] = None


class CommandResultResponse(CamelModel):
    command_id: str
    status: str


class CommandHistoryItem(CamelModel):
    """Command row for the dashboard"""
    id: str
    device_id: str
    command_type: str
    parameters: Dict[str, Any] = Field(default_factory=dict)
    priority: str
    timeout: int
    status: str
    created_at: datetime
    created_by: Optional[str] = None
    sent_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    result: Optional[Dict[str, Any]] = None


class CommandHistoryResponse(CamelModel):
    commands: List[CommandHistoryItem] = Field(default_factory=list)
    total_commands: int = 0
    status_counts: Dict[str, int] = Field(default_factory=dict)
