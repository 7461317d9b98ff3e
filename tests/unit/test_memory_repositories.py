"""
Unit tests for the in-memory repositories and KeyedLock
"""
import threading
from datetime import timedelta

import pytest
from dashcam_backend.domain.models.command import Command, CommandPriority
from dashcam_backend.domain.models.device import Device
from dashcam_backend.domain.models.media_file import MediaFile
from dashcam_backend.domain.exceptions import NotFoundError
from dashcam_backend.infrastructure.memory import KeyedLock


def make_command(command_id: str, device_id: str, created_at) -> Command:
    return Command(
        id=command_id,
        device_id=device_id,
        command_type="take_snapshot",
        parameters={},
        priority=CommandPriority.NORMAL,
        timeout_seconds=30,
        created_at=created_at,
    )


class TestKeyedLock:

    def test_same_key_same_lock(self):
        locks = KeyedLock()
        assert locks.lock_for("cam-1") is locks.lock_for("cam-1")
        assert locks.lock_for("cam-1") is not locks.lock_for("cam-2")

    def test_other_keys_do_not_block(self):
        locks = KeyedLock()
        acquired = threading.Event()

        def other_device():
            with locks.hold("cam-2"):
                acquired.set()

        with locks.hold("cam-1"):
            worker = threading.Thread(target=other_device)
            worker.start()
            assert acquired.wait(timeout=2)
            worker.join()


class TestInMemoryDeviceRepository:

    @pytest.mark.asyncio
    async def test_snapshots_are_isolated(self, device_repository, fixed_now):
        await device_repository.upsert(
            "cam-1", lambda current: Device(device_id="cam-1", registered_at=fixed_now, last_seen=fixed_now)
        )
        device = await device_repository.find_by_id("cam-1")
        device.device_info["mutated"] = True

        assert (await device_repository.find_by_id("cam-1")).device_info == {}
        assert await device_repository.count() == 1

    @pytest.mark.asyncio
    async def test_device_id_cannot_change(self, device_repository, fixed_now):
        with pytest.raises(ValueError):
            await device_repository.upsert(
                "cam-1", lambda current: Device(device_id="cam-2", registered_at=fixed_now, last_seen=fixed_now)
            )


class TestInMemoryCommandRepository:

    @pytest.mark.asyncio
    async def test_sequence_assigned_on_add(self, command_repository, fixed_now):
        first = await command_repository.add(make_command("c1", "cam-1", fixed_now))
        second = await command_repository.add(make_command("c2", "cam-2", fixed_now))
        assert second.sequence > first.sequence

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, command_repository, fixed_now):
        await command_repository.add(make_command("c1", "cam-1", fixed_now))
        with pytest.raises(ValueError):
            await command_repository.add(make_command("c1", "cam-1", fixed_now))

    @pytest.mark.asyncio
    async def test_update_unknown_command(self, command_repository):
        with pytest.raises(NotFoundError):
            await command_repository.update("missing", lambda command: command)

    @pytest.mark.asyncio
    async def test_failed_mutation_leaves_command_untouched(self, command_repository, fixed_now):
        await command_repository.add(make_command("c1", "cam-1", fixed_now))

        def explode(command):
            command.parameters["half"] = "done"
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await command_repository.update("c1", explode)
        assert (await command_repository.find_by_id("c1")).parameters == {}


class TestInMemoryMediaFileRepository:

    @pytest.mark.asyncio
    async def test_recent_and_totals(self, media_file_repository, fixed_now):
        for index in range(3):
            await media_file_repository.save(MediaFile(
                id=f"m{index}",
                device_id="cam-1",
                file_name=f"clip{index}.mp4",
                storage_url=f"media/clip{index}.mp4",
                file_size=1000 * (index + 1),
                mime_type="video/mp4",
                file_type="video",
                media_type="continuous",
                uploaded_at=fixed_now + timedelta(seconds=index),
            ))

        recent = await media_file_repository.list_recent(2)
        assert [media_file.id for media_file in recent] == ["m2", "m1"]
        assert await media_file_repository.count() == 3
        assert await media_file_repository.total_size() == 6000
