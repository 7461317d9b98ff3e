"""
Shared constants for media file records.

The bytes live in an external blob store; these values describe the records
the coordinator keeps about them.
"""

# -----------------------------------------------------------------------------
# File classification
# -----------------------------------------------------------------------------
FILE_TYPE_VIDEO = "video"
FILE_TYPE_IMAGE = "image"
FILE_TYPES = (FILE_TYPE_VIDEO, FILE_TYPE_IMAGE)
ALLOWED_MIME_PREFIXES = ("video/", "image/")

DEFAULT_MEDIA_TYPE = "continuous"

# -----------------------------------------------------------------------------
# Status labels
# -----------------------------------------------------------------------------
UPLOAD_STATUS_COMPLETED = "completed"
PROCESSING_STATUS_QUEUED = "queued"

# Blob store limit mirrored for metadata validation (100MB)
MAX_FILE_SIZE_BYTES = 100 * 1024 * 1024
