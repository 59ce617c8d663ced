import pytest
from sqlalchemy.exc import SQLAlchemyError

import agencydesk.application.cms.publish_all_sections as publish_all_module
from agencydesk.application.cms.discard_all_sections import discard_all_sections_for_page
from agencydesk.application.cms.publish_all_sections import publish_all_sections_for_page
from agencydesk.application.cms.queries import get_page, get_sections_for_page
from agencydesk.application.cms.update_section_draft import update_section_draft
from agencydesk.domain.exceptions import NotFound
from agencydesk.domain.lifecycle.page import promote_draft

from helpers import make_page

SECTIONS = [
    ("info", "InfoBar", {"hours": "9-5", "phone": "555-0100", "tagline": "Hi"}),
    ("promo", "PromoCard", {"title": "Happy hour"}),
    ("banner", "CTABanner", {"title": "Book", "description": "Now", "ctaLabel": "Go"}),
]


@pytest.fixture
def page(ctx):
    return make_page(ctx, sections=SECTIONS)


def _statuses(ctx, page_id):
    return {s.key: s.status for s in get_sections_for_page(ctx, page_id)}


def test_publishes_never_published_sections(ctx, page):
    result = publish_all_sections_for_page(ctx, page_id=page.id)

    assert result.ok
    assert len(result.succeeded) == 3
    assert set(_statuses(ctx, page.id).values()) == {"published"}
    assert get_page(ctx, page.id).status == "published"

    for section in get_sections_for_page(ctx, page.id):
        assert section.published_content == section.draft_content


def test_is_idempotent(ctx, page):
    publish_all_sections_for_page(ctx, page_id=page.id)
    snapshot = {s.id: s.published_content for s in get_sections_for_page(ctx, page.id)}

    result = publish_all_sections_for_page(ctx, page_id=page.id)

    assert result.succeeded == []
    assert result.failed == []
    assert {s.id: s.published_content for s in get_sections_for_page(ctx, page.id)} == snapshot
    assert get_page(ctx, page.id).status == "published"


def test_only_unpublished_sections_are_touched(ctx, page):
    publish_all_sections_for_page(ctx, page_id=page.id)
    promo = get_sections_for_page(ctx, page.id)[1]
    update_section_draft(ctx, section_id=promo.id, draft_content={"title": "Late night"})

    result = publish_all_sections_for_page(ctx, page_id=page.id)

    assert result.succeeded == [promo.id]
    assert get_sections_for_page(ctx, page.id)[1].published_content == {"title": "Late night"}


def test_failed_section_does_not_abort_the_rest(ctx, page, monkeypatch):
    failing = get_sections_for_page(ctx, page.id)[1]

    def flaky_promote(section):
        if section.id == failing.id:
            raise SQLAlchemyError("disk full")
        promote_draft(section)

    monkeypatch.setattr(publish_all_module, "promote_draft", flaky_promote)

    result = publish_all_sections_for_page(ctx, page_id=page.id)

    assert not result.ok
    assert [item_id for item_id, _ in result.failed] == [failing.id]
    assert len(result.succeeded) == 2
    assert _statuses(ctx, page.id) == {"info": "published", "promo": "draft", "banner": "published"}
    # Page status is forced even though one section is still unpublished
    assert get_page(ctx, page.id).status == "published"


def test_partial_failure_can_leave_page_status_alone(ctx, page, monkeypatch):
    publish_all_sections_for_page(ctx, page_id=page.id)
    info = get_sections_for_page(ctx, page.id)[0]
    update_section_draft(ctx, section_id=info.id, draft_content={"hours": "8-6"})

    def always_fails(section):
        raise SQLAlchemyError("locked")

    monkeypatch.setattr(publish_all_module, "promote_draft", always_fails)

    result = publish_all_sections_for_page(ctx, page_id=page.id, force_page_status=False)

    assert [item_id for item_id, _ in result.failed] == [info.id]
    assert get_page(ctx, page.id).status == "dirty"


def test_result_serializes_for_the_api(ctx, page):
    result = publish_all_sections_for_page(ctx, page_id=page.id)
    body = result.to_dict()

    assert body["failed"] == []
    assert len(body["succeeded"]) == 3


def test_discard_all_reverts_every_pending_section(ctx, page):
    publish_all_sections_for_page(ctx, page_id=page.id)
    info, promo, _ = get_sections_for_page(ctx, page.id)

    update_section_draft(ctx, section_id=info.id, draft_content={"hours": "never"})
    update_section_draft(ctx, section_id=promo.id, draft_content={"title": "Gone"})

    result = discard_all_sections_for_page(ctx, page_id=page.id)

    assert sorted(result.succeeded) == sorted([info.id, promo.id])
    assert set(_statuses(ctx, page.id).values()) == {"published"}
    assert get_sections_for_page(ctx, page.id)[1].draft_content == {"title": "Happy hour"}
    assert get_page(ctx, page.id).status == "published"


def test_discard_all_on_never_published_sections_empties_drafts(ctx, page):
    discard_all_sections_for_page(ctx, page_id=page.id)

    for section in get_sections_for_page(ctx, page.id):
        assert section.draft_content == {}
        assert section.status == "published"


def test_other_org_cannot_publish(other_ctx, page):
    with pytest.raises(NotFound):
        publish_all_sections_for_page(other_ctx, page_id=page.id)
