from agencydesk.domain.lifecycle.page import all_sections_published
from agencydesk.extensions import db
from agencydesk.models.section import Section


def mark_page_published_if_complete(ctx, page) -> bool:
    """
    Promote the page to published once every section is published.

    Never moves a page to dirty; only draft writes do that.
    """
    db.session.flush()
    sections = ctx.query(Section).filter(Section.page_id == page.id).all()

    if all_sections_published(sections):
        page.status = "published"
        return True
    return False
