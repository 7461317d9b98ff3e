"""
Unit tests for dashcam_backend.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from dashcam_backend.utils.datetime_utils import epoch_millis, ensure_utc, to_iso, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


class TestToIso:
    """Tests for to_iso"""

    def test_none_returns_none(self):
        assert to_iso(None) is None

    def test_utc_datetime_format(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        assert to_iso(dt) == "2025-01-15T12:00:00.000Z"


class TestEpochMillis:

    def test_known_instant(self):
        dt = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
        assert epoch_millis(dt) == 1000

    def test_defaults_to_now(self):
        before = int(utc_now().timestamp() * 1000)
        assert epoch_millis() >= before
