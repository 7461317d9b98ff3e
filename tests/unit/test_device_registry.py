"""
Unit tests for DeviceRegistry
"""
from datetime import timedelta

import pytest
from dashcam_backend.domain.exceptions import ValidationError


class TestRegister:

    @pytest.mark.asyncio
    async def test_first_registration(self, device_registry, fixed_now):
        device = await device_registry.register(
            "cam-1", device_info={"model": "DC-100"}, ip_address="10.0.0.5",
            user_agent="dashcam/1.0", now=fixed_now,
        )
        assert device.registered_at == fixed_now
        assert device.last_seen == fixed_now
        assert device.ip_address == "10.0.0.5"

    @pytest.mark.asyncio
    async def test_reauthentication_keeps_registration_time(self, device_registry, fixed_now):
        await device_registry.register("cam-1", device_info={"fw": "1"}, now=fixed_now)
        later = fixed_now + timedelta(hours=1)
        device = await device_registry.register("cam-1", device_info={"fw": "2"}, ip_address="10.0.0.9", now=later)

        assert device.registered_at == fixed_now
        assert device.last_seen == later
        assert device.device_info == {"fw": "2"}
        assert device.ip_address == "10.0.0.9"

    @pytest.mark.asyncio
    async def test_blank_device_id(self, device_registry):
        with pytest.raises(ValidationError):
            await device_registry.register("  ")


class TestTouch:

    @pytest.mark.asyncio
    async def test_touch_unknown_device_creates_it(self, device_registry, fixed_now):
        device = await device_registry.touch("cam-9", contact_time=fixed_now)
        assert device.registered_at == fixed_now
        assert await device_registry.exists("cam-9")

    @pytest.mark.asyncio
    async def test_touch_keeps_fields_not_reported(self, device_registry, fixed_now):
        await device_registry.touch(
            "cam-1", contact_time=fixed_now,
            location={"lat": 1.0, "lng": 2.0}, status={"recording": True},
        )
        later = fixed_now + timedelta(seconds=60)
        device = await device_registry.touch("cam-1", contact_time=later, metrics={"cpu": 12})

        assert device.last_seen == later
        assert device.location == {"lat": 1.0, "lng": 2.0}
        assert device.status == {"recording": True}
        assert device.performance_metrics == {"cpu": 12}


class TestOnline:

    @pytest.mark.asyncio
    async def test_online_within_window(self, device_registry, fixed_now):
        device = await device_registry.register("cam-1", now=fixed_now)
        assert device_registry.is_online(device, fixed_now + timedelta(minutes=4)) is True

    @pytest.mark.asyncio
    async def test_offline_after_window(self, device_registry, fixed_now):
        device = await device_registry.register("cam-1", now=fixed_now)
        assert device_registry.is_online(device, fixed_now + timedelta(minutes=6)) is False

    @pytest.mark.asyncio
    async def test_window_boundary_is_offline(self, device_registry, fixed_now):
        device = await device_registry.register("cam-1", now=fixed_now)
        assert device_registry.is_online(device, fixed_now + timedelta(minutes=5)) is False

    @pytest.mark.asyncio
    async def test_list_and_counts(self, device_registry, fixed_now):
        await device_registry.register("cam-1", now=fixed_now)
        await device_registry.register("cam-2", now=fixed_now - timedelta(minutes=10))

        snapshots = {s.device.device_id: s.is_online for s in await device_registry.list(fixed_now)}
        assert snapshots == {"cam-1": True, "cam-2": False}
        assert await device_registry.counts(fixed_now) == (2, 1)
