# agencydesk/application/cms/update_section_draft.py
from copy import deepcopy
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError

from agencydesk.domain.exceptions import PersistenceError, ValidationError
from agencydesk.domain.invariants.section import assert_section
from agencydesk.domain.lifecycle.page import section_status_for
from agencydesk.models.section import Section
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional
from .queries import get_section


def update_section_draft(ctx, *, section_id: str, draft_content: Dict[str, Any]) -> Section:
    """
    Store a new draft for a section.

    The section becomes dirty when the draft differs from the stored
    published snapshot, published when it matches again. A dirty section
    forces its page to dirty; a healed section does not bring the page
    back, only the publish operations do.
    """
    if not isinstance(draft_content, dict):
        raise ValidationError("draft_content must be a JSON object")

    section = get_section(ctx, section_id)

    try:
        with transactional():
            status = section_status_for(draft_content, section.published_content)

            section.draft_content = deepcopy(draft_content)
            section.status = status

            if status == "dirty":
                section.page.status = "dirty"

            assert_section(section)

            log_action(
                ctx,
                action="section.draft",
                entity_type="section",
                entity_id=section.id,
                org_id=section.org_id,
                payload={"status": status},
            )
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not save draft for section {section_id}") from exc

    return section
