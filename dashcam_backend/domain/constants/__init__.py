"""Constants for domain models, command vocabulary and configuration defaults"""

from .command_constants import CommandTypes, ALLOWED_COMMAND_TYPES
from .config_defaults import ConfigFields

__all__ = [
    "CommandTypes",
    "ALLOWED_COMMAND_TYPES",
    "ConfigFields",
]
