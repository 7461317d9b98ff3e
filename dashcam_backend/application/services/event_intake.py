"""Event intake: store device events and derive follow-up actions."""
import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from ...domain.models.event import Event, EventAction
from ...domain.repositories.event_repository import EventRepository
from ...domain.exceptions import ValidationError
from ...utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)

NOTIFY_EMERGENCY_CONTACT = "notify_emergency_contact"

ActionRule = Callable[[Event], Optional[EventAction]]


def emergency_contact_rule(threshold: float, contact_id: str) -> ActionRule:
    """Notify the emergency contact when severity is strictly above ``threshold``"""

    def rule(event: Event) -> Optional[EventAction]:
        if event.severity is not None and event.severity > threshold:
            return EventAction(
                type=NOTIFY_EMERGENCY_CONTACT,
                parameters={"contactId": contact_id},
            )
        return None

    return rule


class EventIntake:
    """
    Accepts telemetry and safety events from devices.

    Follow-up actions come from a list of rules, each a pure function of the
    event. Add rules to extend the policy.
    """

    def __init__(
        self,
        event_repository: EventRepository,
        action_rules: Sequence[ActionRule] = (),
    ) -> None:
        self.event_repository = event_repository
        self.action_rules = list(action_rules)

    async def record(
        self,
        device_id: str,
        event_type: Optional[str],
        timestamp: Optional[datetime],
        severity: Optional[float] = None,
        location: Optional[Dict[str, Any]] = None,
        event_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Event:
        """
        Store an event reported by a device.

        A client-supplied ``event_id`` makes retries idempotent: reporting the
        same ID again returns the stored event unchanged.

        Raises:
            ValidationError: If event type or timestamp is missing, severity is
                outside [0, 1], or the event ID belongs to another device
        """
        if not event_type or not timestamp:
            raise ValidationError("Event type and timestamp are required")
        if severity is not None and not 0.0 <= severity <= 1.0:
            raise ValidationError("Severity must be between 0 and 1")

        event = Event(
            id=event_id or str(uuid.uuid4()),
            device_id=device_id,
            event_type=event_type,
            timestamp=ensure_utc(timestamp),
            received_at=now or utc_now(),
            severity=severity,
            location=location,
            ip_address=ip_address,
            metadata=dict(metadata or {}),
        )

        stored, created = await self.event_repository.add_if_absent(event)
        if not created:
            if stored.device_id != device_id:
                raise ValidationError(f"Event ID {event.id} is already in use")
            logger.info(f"Duplicate event report {stored.id} from device {device_id}")
            return stored

        severity_label = "N/A" if severity is None else severity
        logger.info(f"Event received: {event_type} from device {device_id} (severity: {severity_label})")
        return stored

    def derive_actions(self, event: Event) -> List[EventAction]:
        actions = [action for action in (rule(event) for rule in self.action_rules) if action]
        if actions:
            logger.warning(
                f"High severity event detected: {event.id} "
                f"-> {', '.join(action.type for action in actions)}"
            )
        return actions

    async def recent(self, limit: int = 50) -> List[Event]:
        return await self.event_repository.list_recent(limit)

    async def count(self) -> int:
        return await self.event_repository.count()
