from .section import normalize_section

def normalize_page(page, admin=False, sections=None, use_draft=False):
    data = {
        "id": page.id,
        "name": page.name,
        "slug": page.slug,
        "template": page.template,
        "status": page.status if admin else None,
    }

    if admin:
        data["org_id"] = page.org_id
        data["created_at"] = page.created_at.isoformat() if page.created_at else None
        data["updated_at"] = page.updated_at.isoformat() if page.updated_at else None

    if sections is not None:
        data["sections"] = [
            normalize_section(s, admin=admin, use_draft=use_draft)
            for s in sections
        ]

    return data
