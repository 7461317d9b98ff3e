# Standard library imports
import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class KeyedLock:
    """
    One ``threading.Lock`` per key.

    Callers holding locks for different keys never wait on each other. The
    table guard is only held while looking a lock up, never while the caller's
    critical section runs.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self.lock_for(key):
            yield
