"""
Unit tests for HeartbeatCoordinator
"""
from datetime import timedelta

import pytest
from dashcam_backend.domain.models.command import CommandStatus


class TestHandleHeartbeat:

    @pytest.mark.asyncio
    async def test_updates_registry_and_returns_commands(
        self, heartbeat_coordinator, device_registry, command_queue, fixed_now
    ):
        command = await command_queue.enqueue(
            "cam-1", "take_snapshot", parameters={"quality": "high"}, now=fixed_now
        )
        reported = fixed_now - timedelta(seconds=3)

        result = await heartbeat_coordinator.handle_heartbeat(
            "cam-1",
            timestamp=reported,
            location={"lat": 1.0, "lng": 2.0},
            status={"recording": True},
            metrics={"cpu": 30},
            ip_address="10.0.0.5",
            now=fixed_now,
        )

        assert [(c.id, c.type, c.parameters) for c in result.commands] == [
            (command.id, "take_snapshot", {"quality": "high"})
        ]
        assert result.config_update_available is False
        assert result.server_time == fixed_now

        device = await device_registry.get("cam-1")
        assert device.last_seen == fixed_now
        assert device.last_reported_at == reported
        assert device.location == {"lat": 1.0, "lng": 2.0}
        assert (await command_queue.status(command.id)).status == CommandStatus.SENT

    @pytest.mark.asyncio
    async def test_second_heartbeat_gets_nothing(self, heartbeat_coordinator, command_queue):
        await command_queue.enqueue("cam-1", "take_snapshot")

        first = await heartbeat_coordinator.handle_heartbeat("cam-1")
        second = await heartbeat_coordinator.handle_heartbeat("cam-1")

        assert len(first.commands) == 1
        assert second.commands == []

    @pytest.mark.asyncio
    async def test_heartbeat_without_timestamp(self, heartbeat_coordinator, device_registry):
        await heartbeat_coordinator.handle_heartbeat("cam-1")
        device = await device_registry.get("cam-1")
        assert device.last_reported_at is None
        assert device_registry.is_online(device)
