from agencydesk.domain.lifecycle.event import compute_event_status


def _iso(value):
    return value.isoformat() if value else None


def normalize_event(event):
    return {
        "id": event.id,
        "org_id": event.org_id,
        "title": event.title,
        "short_description": event.short_description,
        "description": event.description,
        "image_url": event.image_url,
        "event_type": event.event_type,
        "starts_at": _iso(event.starts_at),
        "ends_at": _iso(event.ends_at),
        "publish_start_at": _iso(event.publish_start_at),
        "publish_end_at": _iso(event.publish_end_at),
        "status": compute_event_status(event),
        "is_featured": bool(event.is_featured),
        "created_at": _iso(event.created_at),
        "updated_at": _iso(event.updated_at),
    }


def normalize_event_instance(instance):
    return {
        "id": instance.id,
        "event_id": instance.event_id,
        "instance_date": instance.instance_date.isoformat(),
        "custom_description": instance.custom_description,
        "custom_image_url": instance.custom_image_url,
        "status": instance.status,
        "created_at": _iso(instance.created_at),
        "updated_at": _iso(instance.updated_at),
    }
