# Standard library imports
import copy
import threading
from typing import Dict, List, Optional, Tuple

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import Event


class InMemoryEventRepository(EventRepository):
    """Process-lifetime implementation of EventRepository"""

    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}
        self._lock = threading.Lock()

    async def add_if_absent(self, event: Event) -> Tuple[Event, bool]:
        with self._lock:
            existing = self._events.get(event.id)
            if existing is not None:
                return copy.deepcopy(existing), False
            self._events[event.id] = copy.deepcopy(event)
        return copy.deepcopy(event), True

    async def find_by_id(self, event_id: str) -> Optional[Event]:
        with self._lock:
            event = self._events.get(event_id)
        return copy.deepcopy(event) if event else None

    async def list_recent(self, limit: int) -> List[Event]:
        with self._lock:
            events = sorted(self._events.values(), key=lambda e: e.timestamp, reverse=True)
        return [copy.deepcopy(event) for event in events[:limit]]

    async def count(self) -> int:
        with self._lock:
            return len(self._events)
