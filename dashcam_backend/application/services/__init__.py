from .device_registry import DeviceRegistry, DeviceSnapshot
from .configuration_store import ConfigurationStore
from .command_queue import CommandQueue
from .event_intake import EventIntake, emergency_contact_rule
from .heartbeat_coordinator import HeartbeatCoordinator, HeartbeatResult, CommandSummary
from .token_service import TokenService, Credential, DeviceIdentity

__all__ = [
    "DeviceRegistry",
    "DeviceSnapshot",
    "ConfigurationStore",
    "CommandQueue",
    "EventIntake",
    "emergency_contact_rule",
    "HeartbeatCoordinator",
    "HeartbeatResult",
    "CommandSummary",
    "TokenService",
    "Credential",
    "DeviceIdentity",
]
