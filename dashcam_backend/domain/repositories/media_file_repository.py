from abc import ABC, abstractmethod
from typing import Optional, List

from ..models.media_file import MediaFile


class MediaFileRepository(ABC):
    """Repository interface - defines contract for media file records"""

    @abstractmethod
    async def save(self, media_file: MediaFile) -> MediaFile:
        """Save media file record"""
        pass

    @abstractmethod
    async def find_by_id(self, file_id: str) -> Optional[MediaFile]:
        """Find media file record by ID"""
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[MediaFile]:
        """Most recently uploaded first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of media file records"""
        pass

    @abstractmethod
    async def total_size(self) -> int:
        """Sum of recorded file sizes in bytes"""
        pass
