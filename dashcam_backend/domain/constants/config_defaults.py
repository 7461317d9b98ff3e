"""
Default device configuration values.

Materialized into a device's configuration document the first time it is read.
Keys are camelCase because the document is consumed verbatim by the dashcam app.
"""

from typing import Any, Dict


class ConfigFields:
    """Top-level keys of the device configuration document"""
    DEVICE_ID = "deviceId"
    SEGMENT_LENGTH_SECONDS = "segmentLengthSeconds"
    PRE_EVENT_SECONDS = "preEventSeconds"
    POST_EVENT_SECONDS = "postEventSeconds"
    HEARTBEAT_INTERVAL_SECONDS = "heartbeatIntervalSeconds"
    SNAPSHOT_INTERVAL_MINUTES = "snapshotIntervalMinutes"
    AUDIO_RECORDING_ENABLED = "audioRecordingEnabled"
    COLLISION_SENSITIVITY = "collisionSensitivity"
    SERVER_BASE_URL = "serverBaseUrl"
    NETWORK_THROTTLE_CONFIG = "networkThrottleConfig"
    CAMERA_CONFIG = "cameraConfig"
    STORAGE_CONFIG = "storageConfig"
    GPS_CONFIG = "gpsConfig"
    EVENT_DETECTION = "eventDetection"


# -----------------------------------------------------------------------------
# Recording
# -----------------------------------------------------------------------------
SEGMENT_LENGTH_SECONDS = 120
PRE_EVENT_SECONDS = 10
POST_EVENT_SECONDS = 10
HEARTBEAT_INTERVAL_SECONDS = 60
SNAPSHOT_INTERVAL_MINUTES = 5
AUDIO_RECORDING_ENABLED = True
COLLISION_SENSITIVITY = 5

# -----------------------------------------------------------------------------
# Nested sections
# -----------------------------------------------------------------------------
NETWORK_THROTTLE_CONFIG: Dict[str, Any] = {
    "enabled": True,
    "offPeakHours": {"start": "22:00", "end": "06:00"},
    "maxUploadBandwidthKbps": 1024,
    "throttledUploadBandwidthKbps": 256,
}

CAMERA_CONFIG: Dict[str, Any] = {
    "frontCameraEnabled": True,
    "rearCameraEnabled": True,
    "videoResolution": "1080p",
    "videoQuality": "high",
    "snapshotResolution": "1080p",
}

STORAGE_CONFIG: Dict[str, Any] = {
    "maxStorageUsagePercent": 90,
    "cleanupThresholdPercent": 85,
    "eventClipRetentionDays": 30,
    "continuousRecordingRetentionDays": 7,
}

GPS_CONFIG: Dict[str, Any] = {
    "enabled": True,
    "updateIntervalSeconds": 30,
    "accuracyThresholdMeters": 10,
}

EVENT_DETECTION: Dict[str, Any] = {
    "collisionDetectionEnabled": True,
    "harshBrakingDetectionEnabled": True,
    "sharpTurnDetectionEnabled": True,
    "speedingDetectionEnabled": False,
    "speedLimitKmh": 120,
}
