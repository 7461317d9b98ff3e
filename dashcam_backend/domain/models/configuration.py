# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass
class DeviceConfiguration:
    """
    Configuration document for one device.

    ``version`` starts at 1 when the document is materialized and grows by one
    with every merge.
    """
    device_id: str
    document: Dict[str, Any]
    version: int
    updated_at: datetime
