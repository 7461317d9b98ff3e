from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Any, Dict


@dataclass
class MediaFile:
    """
    Record of a media file held by the external blob store.

    Only metadata lives here; ``storage_url`` points at the bytes.
    """

    id: str
    device_id: str
    file_name: str
    storage_url: str
    file_size: int
    mime_type: str
    file_type: str
    media_type: str
    uploaded_at: datetime

    timestamp: Optional[datetime] = None
    duration: Optional[float] = None
    checksum: Optional[str] = None
    camera_id: int = 0
    location: Optional[Dict[str, Any]] = None

    upload_status: str = "completed"
    processing_status: str = "queued"
