from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common_dto import CamelModel


class MediaRegisterRequest(CamelModel):
    """DTO describing a file already written to the blob store"""
    file_name: Optional[str] = None
    storage_url: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    file_type: Optional[str] = None
    media_type: Optional[str] = None
    timestamp: Optional[datetime] = None
    duration: Optional[float] = None
    checksum: Optional[str] = None
    camera_id: Optional[int] = None
    location: Optional[Dict[str, Any]] = None


class MediaRegisterResponse(CamelModel):
    file_id: str
    upload_url: str
    processing_status: str
    file_size: int
    mime_type: str


class MediaStatusResponse(CamelModel):
    file_id: str
    status: str
    upload_status: str
    processing_status: str
    file_size: int
    uploaded_at: datetime
    download_url: str


class MediaListItemResponse(CamelModel):
    file_id: str
    device_id: str
    file_name: str
    file_type: str
    media_type: str
    file_size: int
    mime_type: str
    storage_url: str
    uploaded_at: datetime
    timestamp: Optional[datetime] = None
    duration: Optional[float] = None
    camera_id: int = 0


class MediaListResponse(CamelModel):
    media_files: List[MediaListItemResponse] = Field(default_factory=list)
    total_files: int = 0
    total_size: int = 0
    total_size_mb: float = 0.0
