"""
Shared constants for device commands.

Command type vocabulary understood by the dashcam app, plus the parameter
keys and defaults the command queue relies on.
"""

# -----------------------------------------------------------------------------
# Command types
# -----------------------------------------------------------------------------


class CommandTypes:
    """Command type tags accepted by the queue"""
    TAKE_SNAPSHOT = "take_snapshot"
    START_RECORDING = "start_recording"
    STOP_RECORDING = "stop_recording"
    UPLOAD_LOGS = "upload_logs"
    RESTART_APP = "restart_app"
    UPDATE_CONFIG = "update_config"
    CUSTOM = "custom"


ALLOWED_COMMAND_TYPES = frozenset({
    CommandTypes.TAKE_SNAPSHOT,
    CommandTypes.START_RECORDING,
    CommandTypes.STOP_RECORDING,
    CommandTypes.UPLOAD_LOGS,
    CommandTypes.RESTART_APP,
    CommandTypes.UPDATE_CONFIG,
    CommandTypes.CUSTOM,
})

# Custom commands carry their freeform name in parameters["name"]
CUSTOM_COMMAND_NAME_PARAM = "name"

# -----------------------------------------------------------------------------
# Queue defaults
# -----------------------------------------------------------------------------
DEFAULT_COMMAND_PRIORITY = "normal"

# Status reported to operators right after enqueue
QUEUED_STATUS_LABEL = "queued"

# Rough delivery estimate reported on enqueue (one heartbeat interval or less)
ESTIMATED_EXECUTION_DELAY_SECONDS = 30
