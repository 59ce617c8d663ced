from flask import current_app

from agencydesk.application.batch import BatchResult
from agencydesk.domain.exceptions import NotFound, PersistenceError
from agencydesk.domain.lifecycle.page import UNPUBLISHED_SECTION_STATUSES
from agencydesk.models.section import Section
from .discard_section import discard_section_changes
from .queries import get_page


def discard_all_sections_for_page(ctx, *, page_id: str) -> BatchResult:
    """Best-effort discard of every unpublished section on a page."""
    page = get_page(ctx, page_id)

    pending_ids = [
        section_id
        for (section_id,) in ctx.query(Section)
        .with_entities(Section.id)
        .filter(
            Section.page_id == page.id,
            Section.status.in_(UNPUBLISHED_SECTION_STATUSES),
        )
        .order_by(Section.position.asc())
        .all()
    ]

    result = BatchResult()

    for section_id in pending_ids:
        try:
            discard_section_changes(ctx, section_id=section_id)
        except (PersistenceError, NotFound) as exc:
            current_app.logger.error("Error discarding section %s: %s", section_id, exc)
            result.failed.append((section_id, str(exc)))
        else:
            result.succeeded.append(section_id)

    return result
