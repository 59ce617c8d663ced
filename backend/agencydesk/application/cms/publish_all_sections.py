# agencydesk/application/cms/publish_all_sections.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from agencydesk.application.batch import BatchResult
from agencydesk.domain.lifecycle.page import UNPUBLISHED_SECTION_STATUSES, promote_draft
from agencydesk.models.section import Section
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional
from .queries import get_page


def publish_all_sections_for_page(
    ctx,
    *,
    page_id: str,
    force_page_status: bool = True,
) -> BatchResult:
    """
    Publish every unpublished section of a page, then mark the page published.

    Responsibilities:
    - One commit per section; a failed section is rolled back, logged and skipped
    - Report which sections succeeded and which failed

    With ``force_page_status`` (the default) the page is marked published even
    when some sections failed and are still dirty. Pass False to leave the
    page status untouched in that case.
    """
    page = get_page(ctx, page_id)

    pending = (
        ctx.query(Section)
        .filter(
            Section.page_id == page.id,
            Section.status.in_(UNPUBLISHED_SECTION_STATUSES),
        )
        .order_by(Section.position.asc())
        .all()
    )
    pending_ids = [section.id for section in pending]

    result = BatchResult()

    for section_id, section in zip(pending_ids, pending):
        try:
            with transactional():
                promote_draft(section)
        except SQLAlchemyError as exc:
            current_app.logger.error("Error publishing section %s: %s", section_id, exc)
            result.failed.append((section_id, str(exc)))
        else:
            result.succeeded.append(section_id)

    if result.failed:
        current_app.logger.warning(
            "Page %s publish-all: %d of %d sections failed",
            page_id, len(result.failed), len(pending_ids),
        )

    if force_page_status or result.ok:
        with transactional():
            page.status = "published"

            log_action(
                ctx,
                action="page.publish_all",
                entity_type="page",
                entity_id=page_id,
                org_id=page.org_id,
                payload=result.to_dict(),
            )

    return result
