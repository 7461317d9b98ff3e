# Standard library imports
import copy
import threading
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.media_file_repository import MediaFileRepository
from ...domain.models.media_file import MediaFile


class InMemoryMediaFileRepository(MediaFileRepository):
    """Process-lifetime implementation of MediaFileRepository"""

    def __init__(self) -> None:
        self._files: Dict[str, MediaFile] = {}
        self._lock = threading.Lock()

    async def save(self, media_file: MediaFile) -> MediaFile:
        if not media_file:
            raise ValueError("Media file cannot be None")
        with self._lock:
            self._files[media_file.id] = copy.deepcopy(media_file)
        return copy.deepcopy(media_file)

    async def find_by_id(self, file_id: str) -> Optional[MediaFile]:
        with self._lock:
            media_file = self._files.get(file_id)
        return copy.deepcopy(media_file) if media_file else None

    async def list_recent(self, limit: int) -> List[MediaFile]:
        with self._lock:
            files = sorted(self._files.values(), key=lambda f: f.uploaded_at, reverse=True)
        return [copy.deepcopy(media_file) for media_file in files[:limit]]

    async def count(self) -> int:
        with self._lock:
            return len(self._files)

    async def total_size(self) -> int:
        with self._lock:
            return sum(media_file.file_size or 0 for media_file in self._files.values())
