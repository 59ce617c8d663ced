from agencydesk.extensions import db
from agencydesk.domain.invariants.page import assert_page
from agencydesk.models.section import Section
from agencydesk.utils.audit import log_action
from agencydesk.utils.order import compact_order
from agencydesk.utils.transaction import transactional
from .queries import get_section


def delete_section(ctx, *, section_id: str) -> None:
    section = get_section(ctx, section_id)
    page = section.page
    page_id = section.page_id
    org_id = section.org_id

    with transactional():
        db.session.delete(section)
        db.session.flush()

        # Re-compact remaining sections on the page
        remaining = compact_order(
            ctx.query(Section).filter(Section.page_id == page_id),
            Section,
        )
        assert_page(page, remaining)

        log_action(
            ctx,
            action="section.delete",
            entity_type="section",
            entity_id=section_id,
            org_id=org_id,
            payload={"page_id": page_id},
        )
