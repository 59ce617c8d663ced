from sqlalchemy.exc import SQLAlchemyError

from agencydesk.domain.exceptions import PersistenceError
from agencydesk.domain.invariants.section import assert_section
from agencydesk.domain.lifecycle.page import revert_draft
from agencydesk.models.section import Section
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional
from .page_rollup import mark_page_published_if_complete
from .queries import get_section


def discard_section_changes(ctx, *, section_id: str) -> Section:
    """Reset a section's draft to its published snapshot."""
    section = get_section(ctx, section_id)

    try:
        with transactional():
            revert_draft(section)
            assert_section(section)
            page_published = mark_page_published_if_complete(ctx, section.page)

            log_action(
                ctx,
                action="section.discard",
                entity_type="section",
                entity_id=section.id,
                org_id=section.org_id,
                payload={"page_id": section.page_id, "page_published": page_published},
            )
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not discard changes on section {section_id}") from exc

    return section
