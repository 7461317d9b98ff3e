"""Utility modules for the dashcam backend application."""

from .datetime_utils import utc_now, ensure_utc, to_iso, epoch_millis

__all__ = [
    "utc_now",
    "ensure_utc",
    "to_iso",
    "epoch_millis",
]
