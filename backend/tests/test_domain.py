from types import SimpleNamespace

import pytest

from agencydesk.domain.exceptions import Forbidden, InvariantViolation
from agencydesk.domain.invariants.page import assert_page
from agencydesk.domain.invariants.section import assert_section
from agencydesk.domain.lifecycle.page import (
    json_equal,
    promote_draft,
    revert_draft,
    section_status_for,
)
from agencydesk.store import StoreContext


def _section(**overrides):
    values = {
        "id": "s1",
        "position": 1,
        "status": "published",
        "draft_content": {"title": "A"},
        "published_content": {"title": "A"},
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_status_uses_deep_equality():
    assert section_status_for({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]}) == "published"
    assert section_status_for({"a": [1, {"b": 3}]}, {"a": [1, {"b": 2}]}) == "dirty"
    assert section_status_for({}, None) == "published"
    assert section_status_for({"a": 1, "b": 2}, {"b": 2, "a": 1}) == "published"


@pytest.mark.parametrize(
    "draft, published",
    [
        ({"show": True}, {"show": 1}),
        ({"show": False}, {"show": 0}),
        ({"price": 1.0}, {"price": 1}),
        ({"items": [{"on": True}]}, {"items": [{"on": 1}]}),
        ({"value": None}, {}),
    ],
)
def test_type_changes_make_a_section_dirty(draft, published):
    assert not json_equal(draft, published)
    assert section_status_for(draft, published) == "dirty"


def test_promote_and_revert_copy_instead_of_alias():
    section = _section(draft_content={"items": [1]}, published_content={}, status="dirty")

    promote_draft(section)
    section.draft_content["items"].append(2)
    assert section.published_content == {"items": [1]}

    revert_draft(section)
    assert section.draft_content == {"items": [1]}
    assert section.draft_content is not section.published_content
    assert section.status == "published"


def test_section_status_must_agree_with_content():
    assert_section(_section())
    assert_section(_section(status="draft", published_content={}))

    with pytest.raises(InvariantViolation):
        assert_section(_section(status="dirty"))
    with pytest.raises(InvariantViolation):
        assert_section(_section(status="stale"))


def test_page_rejects_duplicate_positions():
    page = SimpleNamespace(name="Home", slug="home", status="published")

    assert_page(page, [_section(), _section(id="s2", position=2)])
    with pytest.raises(InvariantViolation):
        assert_page(page, [_section(), _section(id="s2")])


def test_user_context_is_org_scoped():
    ctx = StoreContext.for_user(org_id="org-a", user_id="u1", role="editor")

    assert ctx.can_access_org("org-a")
    assert not ctx.can_access_org("org-b")
    assert ctx.require_org() == "org-a"


def test_service_context_is_unscoped_but_has_no_org():
    ctx = StoreContext.service()

    assert ctx.can_access_org("anything")
    with pytest.raises(Forbidden):
        ctx.require_org()


def test_user_context_requires_org():
    with pytest.raises(ValueError):
        StoreContext.for_user(org_id=None, user_id="u1", role="owner")
