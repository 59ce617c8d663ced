def normalize_preview_token(token):
    return {
        "token": token.id,
        "org_id": token.org_id,
        "page_id": token.page_id,
        "section_id": token.section_id,
        "expires_at": token.expires_at.isoformat(),
    }
