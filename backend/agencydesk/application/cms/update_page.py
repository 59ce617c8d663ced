from typing import Any, Dict
from agencydesk.models.page import Page
from agencydesk.domain.exceptions import Conflict, ValidationError
from agencydesk.domain.invariants.page import assert_page
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional
from .queries import get_page


ALLOWED_UPDATE_FIELDS = ("name", "slug", "template", "status")


def update_page(ctx, *, page_id: str, data: Dict[str, Any]) -> Page:
    """
    Direct admin edit of a page.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    - Invariants always revalidated
    """
    page = get_page(ctx, page_id)

    if "slug" in data and data["slug"] != page.slug:
        taken = ctx.query(Page).filter(Page.slug == data["slug"], Page.id != page.id).first()
        if taken:
            raise Conflict("Slug already exists")

    changed_fields: list[str] = []

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(page, field) != data[field]:
                setattr(page, field, data[field])
                changed_fields.append(field)

        if not changed_fields:
            raise ValidationError("No valid fields provided for update")

        assert_page(page)

        log_action(
            ctx,
            action="page.update",
            entity_type="page",
            entity_id=page.id,
            payload={"fields": changed_fields},
        )

    return page
