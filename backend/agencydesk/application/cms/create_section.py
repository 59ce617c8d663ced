from copy import deepcopy
from typing import Any, Dict
from agencydesk.extensions import db
from agencydesk.models.section import Section
from agencydesk.domain.exceptions import Conflict, ValidationError
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional
from .queries import get_page

REQUIRED_FIELDS = ("key", "label", "component")


def create_section(ctx, *, page_id: str, data: Dict[str, Any]) -> Section:
    """
    Append a never-published section to a page.

    The optional ``content`` becomes the first draft; the published
    snapshot starts empty.
    """
    page = get_page(ctx, page_id)

    missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    content = data.get("content", {})
    if not isinstance(content, dict):
        raise ValidationError("content must be a JSON object")

    exists = ctx.query(Section).filter(
        Section.page_id == page.id,
        Section.key == data["key"],
    ).first()
    if exists:
        raise Conflict(f"Section key '{data['key']}' already exists on this page")

    max_position = db.session.query(db.func.max(Section.position))\
        .filter(Section.page_id == page.id)\
        .scalar() or 0

    section = Section()
    section.org_id = page.org_id
    section.page_id = page.id
    section.key = data["key"]
    section.label = data["label"]
    section.component = data["component"]
    section.position = max_position + 1
    section.draft_content = deepcopy(content)
    section.published_content = {}
    section.status = "draft"

    with transactional():
        db.session.add(section)
        db.session.flush()

        # A never-published section means the page is no longer fully published
        if page.status == "published":
            page.status = "dirty"

        log_action(
            ctx,
            action="section.create",
            entity_type="section",
            entity_id=section.id,
            org_id=page.org_id,
            payload={"page_id": page.id, "component": section.component, "position": section.position},
        )

    return section
