# agencydesk/application/events/event_instances.py
from datetime import date, timedelta
from typing import Any, Dict, List

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from agencydesk.domain.exceptions import NotFound, ValidationError
from agencydesk.domain.lifecycle.event import EVENT_INSTANCE_STATUSES
from agencydesk.extensions import db
from agencydesk.models.event_instance import EventInstance
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional
from .events import get_event


def parse_calendar_date(value: Any, field: str) -> date:
    """
    YYYY-MM-DD → date.

    Calendar dates carry no time zone, so nothing can shift them a day.
    """
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date") from exc


def sunday_based_weekday(day: date) -> int:
    """0 = Sunday … 6 = Saturday."""
    return (day.weekday() + 1) % 7


def weekly_dates(day_of_week: int, start: date, end: date) -> List[date]:
    """Every date in [start, end] falling on ``day_of_week`` (0 = Sunday)."""
    current = start + timedelta(days=(day_of_week - sunday_based_weekday(start)) % 7)

    dates = []
    while current <= end:
        dates.append(current)
        current += timedelta(days=7)
    return dates


def generate_event_instances(
    ctx,
    *,
    event_id: str,
    day_of_week: int,
    start_date: Any,
    end_date: Any,
) -> List[EventInstance]:
    """
    Create one draft instance per week for a recurring event.

    Each instance is committed on its own; a date that fails to insert
    (for example because it already exists) is logged and skipped.
    """
    if isinstance(day_of_week, bool) or not isinstance(day_of_week, int) or not 0 <= day_of_week <= 6:
        raise ValidationError("day_of_week must be an integer between 0 (Sunday) and 6 (Saturday)")

    start = parse_calendar_date(start_date, "start_date")
    end = parse_calendar_date(end_date, "end_date")

    event = get_event(ctx, event_id)

    instances: List[EventInstance] = []
    failed: List[str] = []

    for instance_date in weekly_dates(day_of_week, start, end):
        instance = EventInstance()
        instance.event_id = event.id
        instance.instance_date = instance_date
        instance.status = "draft"

        try:
            with transactional():
                db.session.add(instance)
        except SQLAlchemyError as exc:
            current_app.logger.error(
                "Error creating instance for %s on %s: %s",
                event_id, instance_date.isoformat(), exc,
            )
            failed.append(instance_date.isoformat())
        else:
            instances.append(instance)

    with transactional():
        log_action(
            ctx,
            action="event.generate_instances",
            entity_type="event",
            entity_id=event_id,
            org_id=event.org_id,
            payload={
                "day_of_week": day_of_week,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "created": len(instances),
                "failed": failed,
            },
        )

    return instances


def list_event_instances(ctx, *, event_id: str) -> List[EventInstance]:
    event = get_event(ctx, event_id)
    return (
        EventInstance.query
        .filter(EventInstance.event_id == event.id)
        .order_by(EventInstance.instance_date.asc())
        .all()
    )


def get_event_instance(ctx, *, event_id: str, instance_id: str) -> EventInstance:
    event = get_event(ctx, event_id)
    instance = EventInstance.query.filter(
        EventInstance.id == instance_id,
        EventInstance.event_id == event.id,
    ).first()

    if not instance:
        raise NotFound("Instance not found")
    return instance


def update_event_instance(
    ctx,
    *,
    event_id: str,
    instance_id: str,
    data: Dict[str, Any],
) -> EventInstance:
    instance = get_event_instance(ctx, event_id=event_id, instance_id=instance_id)

    if "status" in data and data["status"] not in EVENT_INSTANCE_STATUSES:
        raise ValidationError(f"Invalid instance status: {data['status']}")

    with transactional():
        if "custom_description" in data:
            description = data["custom_description"]
            instance.custom_description = (description or "").strip() or None
        if "custom_image_url" in data:
            instance.custom_image_url = data["custom_image_url"] or None
        if "status" in data:
            instance.status = data["status"]

        log_action(
            ctx,
            action="event_instance.update",
            entity_type="event_instance",
            entity_id=instance.id,
            payload={"fields": sorted(data.keys())},
        )

    return instance


def delete_event_instance(ctx, *, event_id: str, instance_id: str) -> None:
    instance = get_event_instance(ctx, event_id=event_id, instance_id=instance_id)

    with transactional():
        db.session.delete(instance)

        log_action(
            ctx,
            action="event_instance.delete",
            entity_type="event_instance",
            entity_id=instance_id,
            payload={"event_id": event_id},
        )
