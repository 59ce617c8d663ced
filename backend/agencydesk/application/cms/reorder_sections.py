from typing import Any, Dict, List
from agencydesk.extensions import db
from agencydesk.models.section import Section
from agencydesk.domain.exceptions import ValidationError
from agencydesk.domain.invariants.page import assert_page
from agencydesk.utils.audit import log_action
from agencydesk.utils.order import compact_order
from agencydesk.utils.transaction import transactional
from .queries import get_page


def reorder_sections(ctx, *, page_id: str, items: List[Dict[str, Any]]) -> List[Section]:
    """
    Apply client positions ([{id, position}, ...]) then normalize to 1..N.

    Ids that do not belong to the page are ignored.
    """
    page = get_page(ctx, page_id)

    if not isinstance(items, list) or not all(
        isinstance(item, dict) and "id" in item and isinstance(item.get("position"), int)
        for item in items
    ):
        raise ValidationError("Expected a list of {id, position} objects")

    sections = ctx.query(Section).filter(Section.page_id == page.id).all()
    section_map = {s.id: s for s in sections}

    with transactional():
        for item in items:
            if item["id"] in section_map:
                section_map[item["id"]].position = item["position"]

        db.session.flush()

        ordered = compact_order(
            ctx.query(Section).filter(Section.page_id == page.id),
            Section,
        )
        assert_page(page, ordered)

        log_action(
            ctx,
            action="section.reorder",
            entity_type="page",
            entity_id=page.id,
            org_id=page.org_id,
            payload={"count": len(items)},
        )

    return ordered
