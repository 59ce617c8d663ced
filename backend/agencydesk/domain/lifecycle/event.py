from datetime import datetime, timezone
from typing import Optional

EVENT_STATUSES = {"draft", "scheduled", "live", "past", "archived"}
EVENT_INSTANCE_STATUSES = {"draft", "published", "cancelled"}


def compute_event_status(event, now: Optional[datetime] = None) -> str:
    """
    Derive an event's visibility status from its publish window.

    archived and an explicit draft are kept as stored.
    """
    if event.status in ("archived", "draft"):
        return event.status

    if not event.publish_start_at:
        return "draft"

    now = now or datetime.now(timezone.utc).replace(tzinfo=None)

    if now < event.publish_start_at:
        return "scheduled"

    if event.publish_end_at and now > event.publish_end_at:
        return "past"

    return "live"
