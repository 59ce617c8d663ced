def normalize_section(section, admin=False, use_draft=False):
    data = {
        "id": section.id,
        "page_id": section.page_id,
        "key": section.key,
        "label": section.label,
        "component": section.component,
        "position": section.position,
        # Renderers read published_content; previews swap in the draft.
        "published_content": (
            section.draft_content if use_draft else section.published_content
        ) or {},
    }

    if admin:
        data["org_id"] = section.org_id
        data["draft_content"] = section.draft_content or {}
        data["status"] = section.status
        data["created_at"] = section.created_at.isoformat() if section.created_at else None
        data["updated_at"] = section.updated_at.isoformat() if section.updated_at else None

    return data
