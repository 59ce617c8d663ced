# agencydesk/application/cms/queries.py
from typing import Any, Dict, List, Optional

from agencydesk.domain.exceptions import NotFound
from agencydesk.models.page import Page
from agencydesk.models.section import Section
from agencydesk.normalizers.section import normalize_section


def get_page(ctx, page_id: str) -> Page:
    page = ctx.query(Page).filter(Page.id == page_id).first()
    if not page:
        raise NotFound("Page not found")
    return page


def get_page_by_slug(ctx, slug: str, org_id: Optional[str] = None) -> Page:
    query = ctx.query(Page).filter(Page.slug == slug)
    if org_id:
        query = query.filter(Page.org_id == org_id)

    page = query.first()
    if not page:
        raise NotFound("Page not found")
    return page


def list_pages(ctx, status: Optional[str] = None) -> List[Page]:
    query = ctx.query(Page)
    if status:
        query = query.filter(Page.status == status)
    return query.order_by(Page.name.asc()).all()


def get_section(ctx, section_id: str) -> Section:
    section = ctx.query(Section).filter(Section.id == section_id).first()
    if not section:
        raise NotFound("Section not found")
    return section


def get_sections_for_page(ctx, page_id: str) -> List[Section]:
    return (
        ctx.query(Section)
        .filter(Section.page_id == page_id)
        .order_by(Section.position.asc())
        .all()
    )


def get_page_sections(ctx, page_id: str, *, use_draft: bool = False) -> List[Dict[str, Any]]:
    """
    Sections of a page as the site renders them.

    With ``use_draft`` every section renders its draft; a preview never
    mixes drafts with published snapshots.
    """
    return [
        normalize_section(section, use_draft=use_draft)
        for section in get_sections_for_page(ctx, page_id)
    ]
