from agencydesk.application.cms.create_page import create_page
from agencydesk.application.cms.create_section import create_section
from agencydesk.application.cms.publish_all_sections import publish_all_sections_for_page

PASSWORD = "correct-horse-battery"


def make_page(ctx, slug="home", sections=(), publish=False):
    """Page with ``(key, component, content)`` sections, optionally published."""
    page = create_page(ctx, data={"name": slug.title(), "slug": slug})

    for key, component, content in sections:
        create_section(
            ctx,
            page_id=page.id,
            data={"key": key, "label": key.title(), "component": component, "content": content},
        )

    if publish:
        publish_all_sections_for_page(ctx, page_id=page.id)

    return page


HERO_CONTENT = {
    "badge": {"icon": "star", "text": "Since 1998"},
    "title": "Welcome",
    "subtitle": "Fresh food every day",
    "heroImage": "https://cdn.example.com/hero.jpg",
    "primaryCta": {"href": "/menu", "label": "See menu"},
    "accentImage": "https://cdn.example.com/accent.jpg",
    "secondaryCta": {"href": "/contact", "label": "Contact"},
}
