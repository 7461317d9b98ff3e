from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Dict, List, Optional
from ..models.command import Command


class CommandRepository(ABC):
    """Repository interface - defines contract for command storage"""

    @abstractmethod
    async def add(self, command: Command) -> Command:
        """Store a new command, assigning its creation sequence"""
        pass

    @abstractmethod
    async def find_by_id(self, command_id: str) -> Optional[Command]:
        """Find command by ID"""
        pass

    @abstractmethod
    async def drain_pending(self, device_id: str, sent_at: datetime) -> List[Command]:
        """
        Atomically mark every pending command for the device as sent.

        Returns the transitioned commands in delivery order. Two concurrent
        drains for the same device never return the same command.
        """
        pass

    @abstractmethod
    async def update(
        self,
        command_id: str,
        mutate: Callable[[Command], Command],
    ) -> Command:
        """
        Atomically apply ``mutate`` to a stored command.

        Raises:
            NotFoundError: If the command does not exist
        """
        pass

    @abstractmethod
    async def list_by_device(self, device_id: str) -> List[Command]:
        """All commands ever queued for a device, oldest first"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Command]:
        """All commands, oldest first"""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[str, int]:
        """Number of commands per lifecycle status"""
        pass
