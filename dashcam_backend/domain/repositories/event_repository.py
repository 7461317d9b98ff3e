from abc import ABC, abstractmethod
from typing import Optional, Tuple, List

from ..models.event import Event


class EventRepository(ABC):
    """Repository interface - defines contract for event data access"""

    @abstractmethod
    async def add_if_absent(self, event: Event) -> Tuple[Event, bool]:
        """Store the event unless its ID is taken; returns (stored event, created)"""
        pass

    @abstractmethod
    async def find_by_id(self, event_id: str) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[Event]:
        """Newest events first, by event timestamp"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored events"""
        pass
