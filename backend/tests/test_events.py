from datetime import date, datetime
from types import SimpleNamespace

import pytest

from agencydesk.application.events.event_instances import (
    delete_event_instance,
    generate_event_instances,
    list_event_instances,
    update_event_instance,
    weekly_dates,
)
from agencydesk.application.events.events import create_event, get_event, parse_datetime
from agencydesk.domain.exceptions import NotFound, ValidationError
from agencydesk.domain.lifecycle.event import compute_event_status


@pytest.fixture
def event(ctx):
    return create_event(
        ctx,
        data={
            "title": "Trivia night",
            "starts_at": "2024-01-01T19:00:00Z",
            "ends_at": "2024-12-31T22:00:00Z",
        },
    )


def _dates(instances):
    return [i.instance_date.isoformat() for i in instances]


# ------------------------
# Status derivation
# ------------------------

NOW = datetime(2024, 6, 1, 12, 0)


def _event(status="scheduled", start=None, end=None):
    return SimpleNamespace(status=status, publish_start_at=start, publish_end_at=end)


@pytest.mark.parametrize(
    "event_obj, expected",
    [
        (_event(status="archived", start=datetime(2024, 1, 1)), "archived"),
        (_event(status="draft", start=datetime(2024, 1, 1)), "draft"),
        (_event(), "draft"),
        (_event(start=datetime(2024, 7, 1)), "scheduled"),
        (_event(start=datetime(2024, 1, 1), end=datetime(2024, 5, 1)), "past"),
        (_event(start=datetime(2024, 1, 1), end=datetime(2024, 7, 1)), "live"),
        (_event(start=datetime(2024, 1, 1)), "live"),
    ],
)
def test_compute_event_status(event_obj, expected):
    assert compute_event_status(event_obj, now=NOW) == expected


# ------------------------
# Events
# ------------------------

def test_create_event_stores_naive_utc(ctx):
    event = create_event(
        ctx,
        data={
            "title": "Brunch",
            "starts_at": "2024-03-10T10:00:00+02:00",
            "ends_at": "2024-03-10T14:00:00+02:00",
            "status": "scheduled",
        },
    )

    assert event.starts_at == datetime(2024, 3, 10, 8, 0)
    assert get_event(ctx, event.id).title == "Brunch"


def test_create_event_validates_input(ctx):
    with pytest.raises(ValidationError):
        create_event(ctx, data={"title": "No dates"})

    with pytest.raises(ValidationError):
        create_event(
            ctx,
            data={"title": "Backwards", "starts_at": "2024-03-10", "ends_at": "2024-03-09"},
        )

    with pytest.raises(ValidationError):
        create_event(
            ctx,
            data={"title": "X", "starts_at": "2024-03-10", "ends_at": "2024-03-11", "status": "bogus"},
        )


def test_parse_datetime_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_datetime("not a date", "starts_at")
    assert parse_datetime("", "starts_at") is None


def test_events_are_org_scoped(other_ctx, event):
    with pytest.raises(NotFound):
        get_event(other_ctx, event.id)


# ------------------------
# Instance generation
# ------------------------

def test_weekly_dates_cover_every_wednesday():
    dates = weekly_dates(3, date(2024, 1, 1), date(2024, 1, 31))

    assert [d.isoformat() for d in dates] == [
        "2024-01-03", "2024-01-10", "2024-01-17", "2024-01-24", "2024-01-31",
    ]


def test_weekly_dates_include_start_when_it_matches():
    # 2024-01-07 is a Sunday
    assert weekly_dates(0, date(2024, 1, 7), date(2024, 1, 14)) == [
        date(2024, 1, 7), date(2024, 1, 14),
    ]


def test_weekly_dates_wrap_forward_past_end_of_week():
    # Starts on a Saturday, first Monday is two days later
    assert weekly_dates(1, date(2024, 1, 6), date(2024, 1, 8)) == [date(2024, 1, 8)]
    assert weekly_dates(1, date(2024, 1, 9), date(2024, 1, 14)) == []


def test_generate_creates_draft_instances(ctx, event):
    instances = generate_event_instances(
        ctx, event_id=event.id, day_of_week=3, start_date="2024-01-01", end_date="2024-01-31"
    )

    assert _dates(instances) == [
        "2024-01-03", "2024-01-10", "2024-01-17", "2024-01-24", "2024-01-31",
    ]
    assert {i.status for i in instances} == {"draft"}
    assert _dates(list_event_instances(ctx, event_id=event.id)) == _dates(instances)


def test_regenerating_skips_existing_dates(ctx, event):
    generate_event_instances(
        ctx, event_id=event.id, day_of_week=3, start_date="2024-01-01", end_date="2024-01-15"
    )

    again = generate_event_instances(
        ctx, event_id=event.id, day_of_week=3, start_date="2024-01-01", end_date="2024-01-31"
    )

    assert _dates(again) == ["2024-01-17", "2024-01-24", "2024-01-31"]
    assert len(list_event_instances(ctx, event_id=event.id)) == 5


@pytest.mark.parametrize("day_of_week", [-1, 7, "3", None, True, 2.0])
def test_generate_rejects_invalid_weekday(ctx, event, day_of_week):
    with pytest.raises(ValidationError):
        generate_event_instances(
            ctx,
            event_id=event.id,
            day_of_week=day_of_week,
            start_date="2024-01-01",
            end_date="2024-01-31",
        )


def test_generate_rejects_malformed_dates(ctx, event):
    with pytest.raises(ValidationError):
        generate_event_instances(
            ctx, event_id=event.id, day_of_week=3, start_date="01/01/2024", end_date="2024-01-31"
        )


def test_generate_for_other_org_event_is_not_found(other_ctx, event):
    with pytest.raises(NotFound):
        generate_event_instances(
            other_ctx, event_id=event.id, day_of_week=3, start_date="2024-01-01", end_date="2024-01-31"
        )


# ------------------------
# Instance edits
# ------------------------

def test_update_and_delete_instance(ctx, event):
    first, second = generate_event_instances(
        ctx, event_id=event.id, day_of_week=3, start_date="2024-01-01", end_date="2024-01-10"
    )

    updated = update_event_instance(
        ctx,
        event_id=event.id,
        instance_id=first.id,
        data={"custom_description": "  Holiday edition  ", "status": "published"},
    )
    assert updated.custom_description == "Holiday edition"
    assert updated.status == "published"

    cleared = update_event_instance(
        ctx, event_id=event.id, instance_id=first.id, data={"custom_description": "   "}
    )
    assert cleared.custom_description is None

    with pytest.raises(ValidationError):
        update_event_instance(ctx, event_id=event.id, instance_id=first.id, data={"status": "live"})

    delete_event_instance(ctx, event_id=event.id, instance_id=second.id)
    assert _dates(list_event_instances(ctx, event_id=event.id)) == ["2024-01-03"]
