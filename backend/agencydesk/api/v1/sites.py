# agencydesk/api/v1/sites.py
"""Public site rendering. No authentication; previews need a token."""
from flask import request, jsonify
from agencydesk.application.cms.queries import get_page_by_slug, get_page_sections
from agencydesk.application.preview.tokens import validate_preview_token
from agencydesk.domain.exceptions import Forbidden, NotFound
from agencydesk.middleware.org_middleware import resolve_org
from agencydesk.normalizers.page import normalize_page
from agencydesk.store import StoreContext
from . import v1_bp


@v1_bp.route("/sites/<org_id>/pages/<slug>", methods=["GET"])
def render_site_page(org_id, slug):
    resolve_org(org_id)
    store = StoreContext.service()
    page = get_page_by_slug(store, slug, org_id=org_id)

    token = request.args.get("preview")
    use_draft = False

    if token:
        validation = validate_preview_token(store, token, org_id=org_id, page_id=page.id)
        if not validation.valid:
            raise Forbidden(validation.error)
        use_draft = True
    elif page.status == "draft":
        # Never published; nothing public to show yet
        raise NotFound("Page not found")

    data = normalize_page(page)
    data["preview"] = use_draft
    data["sections"] = get_page_sections(store, page.id, use_draft=use_draft)

    return jsonify({"page": data})
