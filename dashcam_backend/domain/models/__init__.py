from .device import Device
from .command import Command, CommandStatus, CommandPriority
from .configuration import DeviceConfiguration
from .event import Event, EventAction
from .media_file import MediaFile

__all__ = [
    "Device",
    "Command",
    "CommandStatus",
    "CommandPriority",
    "DeviceConfiguration",
    "Event",
    "EventAction",
    "MediaFile",
]
