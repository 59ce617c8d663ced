# agencydesk/application/events/events.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import parse, ParserError

from agencydesk.domain.exceptions import NotFound, ValidationError
from agencydesk.domain.lifecycle.event import EVENT_STATUSES
from agencydesk.extensions import db
from agencydesk.models.event import Event
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional

REQUIRED_FIELDS = ("title", "starts_at", "ends_at")
TEXT_FIELDS = ("short_description", "description", "image_url", "event_type")
DATETIME_FIELDS = ("starts_at", "ends_at", "publish_start_at", "publish_end_at")


def parse_datetime(value: Any, field: str) -> Optional[datetime]:
    """ISO 8601 string → naive UTC datetime."""
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be an ISO 8601 datetime")

    try:
        parsed = parse(value)
    except (ParserError, ValueError, OverflowError) as exc:
        raise ValidationError(f"{field} must be an ISO 8601 datetime") from exc

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def create_event(ctx, *, data: Dict[str, Any]) -> Event:
    org_id = ctx.require_org()

    missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    status = data.get("status") or "draft"
    if status not in EVENT_STATUSES:
        raise ValidationError(f"Invalid event status: {status}")

    event = Event()
    event.org_id = org_id
    event.title = data["title"]
    event.status = status
    event.is_featured = bool(data.get("is_featured", False))

    for field in TEXT_FIELDS:
        setattr(event, field, data.get(field) or None)

    for field in DATETIME_FIELDS:
        setattr(event, field, parse_datetime(data.get(field), field))

    if event.ends_at < event.starts_at:
        raise ValidationError("ends_at must not be before starts_at")

    with transactional():
        db.session.add(event)
        db.session.flush()

        log_action(
            ctx,
            action="event.create",
            entity_type="event",
            entity_id=event.id,
            payload={"title": event.title, "status": event.status},
        )

    return event


def list_events(ctx) -> List[Event]:
    return ctx.query(Event).order_by(Event.starts_at.desc()).all()


def get_event(ctx, event_id: str) -> Event:
    event = ctx.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFound("Event not found")
    return event
