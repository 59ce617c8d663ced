from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from agencydesk.extensions import db
from agencydesk.models.page import Page
from agencydesk.domain.exceptions import Conflict, ValidationError
from agencydesk.domain.invariants.page import assert_page
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional


def create_page(ctx, *, data: Dict[str, Any]) -> Page:
    """
    Create a page in the caller's organization.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug per organization
    - Invalid initial status
    """
    org_id = ctx.require_org()

    name: str | None = data.get("name")
    slug: str | None = data.get("slug")

    if not name or not slug:
        raise ValidationError("Both name and slug are required")

    if ctx.query(Page).filter(Page.slug == slug).first():
        raise Conflict("Slug already exists")

    page = Page()
    page.org_id = org_id
    page.name = name
    page.slug = slug
    page.template = data.get("template") or None
    page.status = data.get("status") or "draft"

    try:
        with transactional():
            assert_page(page)

            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            log_action(
                ctx,
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                payload={"name": page.name, "slug": page.slug, "status": page.status},
            )

    except IntegrityError as exc:
        raise Conflict("A page with this slug already exists") from exc

    return page
