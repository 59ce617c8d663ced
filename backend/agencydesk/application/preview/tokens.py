# agencydesk/application/preview/tokens.py
"""
Preview tokens.

A token is an unauthenticated, time-limited capability to read a page's
drafts. There is no revocation: a token stops working when it expires and
is eventually removed by ``cleanup_expired_tokens``.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from flask import current_app

from agencydesk.domain.exceptions import Forbidden, NotFound, ValidationError
from agencydesk.extensions import db
from agencydesk.models.base import utc_now
from agencydesk.models.page import Page
from agencydesk.models.preview_token import PreviewToken
from agencydesk.models.section import Section
from agencydesk.utils.audit import log_action
from agencydesk.utils.transaction import transactional


@dataclass
class PreviewValidation:
    valid: bool
    token: Optional[PreviewToken] = None
    error: Optional[str] = None


def create_preview_token(
    ctx,
    *,
    org_id: str,
    page_id: str,
    section_id: Optional[str] = None,
    user_id: Optional[str] = None,
    ttl_hours: Optional[int] = None,
) -> str:
    """Issue a token for a page (optionally one section); returns its id."""
    if not ctx.can_access_org(org_id):
        raise Forbidden("Cannot issue preview tokens for another organization")

    if ttl_hours is None:
        ttl_hours = current_app.config.get("PREVIEW_TOKEN_TTL_HOURS", 24)
    if isinstance(ttl_hours, bool) or not isinstance(ttl_hours, (int, float)) or ttl_hours <= 0:
        raise ValidationError("expires_in_hours must be a positive number")

    page = ctx.query(Page).filter(Page.id == page_id, Page.org_id == org_id).first()
    if not page:
        raise NotFound("Page not found")

    if section_id:
        section = ctx.query(Section).filter(
            Section.id == section_id,
            Section.page_id == page.id,
            Section.org_id == org_id,
        ).first()
        if not section:
            raise NotFound("Section not found")

    token = PreviewToken()
    token.org_id = org_id
    token.page_id = page.id
    token.section_id = section_id or None
    token.user_id = user_id or None
    token.expires_at = utc_now() + timedelta(hours=ttl_hours)

    with transactional():
        db.session.add(token)
        db.session.flush()

        log_action(
            ctx,
            action="preview_token.create",
            entity_type="page",
            entity_id=page.id,
            org_id=org_id,
            payload={"section_id": token.section_id, "expires_at": token.expires_at.isoformat()},
        )

    return token.id


def resolve_preview_token(ctx, token_id: str) -> Optional[PreviewToken]:
    """The unexpired token with this id, or None."""
    if not token_id:
        return None

    return (
        ctx.query(PreviewToken)
        .filter(PreviewToken.id == token_id, PreviewToken.expires_at > utc_now())
        .first()
    )


def validate_preview_token(
    ctx,
    token_id: str,
    org_id: Optional[str] = None,
    page_id: Optional[str] = None,
    section_id: Optional[str] = None,
) -> PreviewValidation:
    """
    Resolve a token and check it against the given scope.

    Every scoping argument that is provided must match the stored value.
    """
    token = resolve_preview_token(ctx, token_id)

    if not token:
        return PreviewValidation(valid=False, error="Token not found or expired")

    if org_id and token.org_id != org_id:
        return PreviewValidation(valid=False, error="Token does not match organization")

    if page_id and token.page_id != page_id:
        return PreviewValidation(valid=False, error="Token does not match page")

    if section_id and token.section_id != section_id:
        return PreviewValidation(valid=False, error="Token does not match section")

    return PreviewValidation(valid=True, token=token)


def cleanup_expired_tokens(ctx) -> int:
    """Delete expired tokens visible to ``ctx``; returns how many went."""
    with transactional():
        deleted = (
            ctx.query(PreviewToken)
            .filter(PreviewToken.expires_at <= utc_now())
            .delete(synchronize_session=False)
        )

    current_app.logger.info("Removed %d expired preview tokens", deleted)
    return deleted
