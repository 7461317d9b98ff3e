# Standard library imports
import copy
import itertools
import threading
from collections import Counter
from datetime import datetime
from typing import Callable, Dict, List, Optional

# Local application imports
from ...domain.repositories.command_repository import CommandRepository
from ...domain.models.command import Command, CommandStatus
from ...domain.exceptions import NotFoundError
from .keyed_lock import KeyedLock


class InMemoryCommandRepository(CommandRepository):
    """
    Process-lifetime implementation of CommandRepository.

    Every mutation of a command happens under the lock of its target device,
    so a drain, a completion report and an expiry for the same device are
    serialized while other devices proceed independently.
    """

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}
        self._by_device: Dict[str, List[str]] = {}
        self._table_lock = threading.Lock()
        self._device_locks = KeyedLock()
        self._sequence = itertools.count(1)

    async def add(self, command: Command) -> Command:
        if not command:
            raise ValueError("Command cannot be None")

        with self._device_locks.hold(command.device_id):
            with self._table_lock:
                if command.id in self._commands:
                    raise ValueError(f"Command {command.id} already exists")
                stored = copy.deepcopy(command)
                stored.sequence = next(self._sequence)
                self._commands[stored.id] = stored
                self._by_device.setdefault(stored.device_id, []).append(stored.id)
            return copy.deepcopy(stored)

    async def find_by_id(self, command_id: str) -> Optional[Command]:
        if not command_id:
            return None
        with self._table_lock:
            command = self._commands.get(command_id)
        return copy.deepcopy(command) if command else None

    async def drain_pending(self, device_id: str, sent_at: datetime) -> List[Command]:
        with self._device_locks.hold(device_id):
            with self._table_lock:
                pending = [
                    self._commands[command_id]
                    for command_id in self._by_device.get(device_id, [])
                    if self._commands[command_id].status == CommandStatus.PENDING
                ]
            pending.sort(key=lambda command: command.delivery_order)
            drained = []
            for command in pending:
                sent = copy.deepcopy(command)
                sent.status = CommandStatus.SENT
                sent.sent_at = sent_at
                drained.append(sent)
            with self._table_lock:
                for sent in drained:
                    self._commands[sent.id] = sent
            return [copy.deepcopy(command) for command in drained]

    async def update(
        self,
        command_id: str,
        mutate: Callable[[Command], Command],
    ) -> Command:
        with self._table_lock:
            command = self._commands.get(command_id)
        if command is None:
            raise NotFoundError(f"Command {command_id} not found")

        with self._device_locks.hold(command.device_id):
            with self._table_lock:
                current = self._commands[command_id]
            updated = mutate(copy.deepcopy(current))
            if updated.id != command_id or updated.device_id != current.device_id:
                raise ValueError("Command identity cannot change on update")
            with self._table_lock:
                self._commands[command_id] = updated
            return copy.deepcopy(updated)

    async def list_by_device(self, device_id: str) -> List[Command]:
        with self._table_lock:
            commands = [self._commands[cid] for cid in self._by_device.get(device_id, [])]
        return [copy.deepcopy(command) for command in commands]

    async def list_all(self) -> List[Command]:
        with self._table_lock:
            commands = sorted(self._commands.values(), key=lambda command: command.sequence)
        return [copy.deepcopy(command) for command in commands]

    async def count_by_status(self) -> Dict[str, int]:
        with self._table_lock:
            counts = Counter(command.status.value for command in self._commands.values())
        return {status.value: counts.get(status.value, 0) for status in CommandStatus}
