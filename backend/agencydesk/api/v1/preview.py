from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from agencydesk.utils.decorators import (
    org_member_required,
    roles_required,
    feature_enabled,
    WRITE_ROLES,
)
from agencydesk.application.preview.tokens import create_preview_token, resolve_preview_token
from agencydesk.domain.exceptions import ValidationError
from agencydesk.normalizers.preview import normalize_preview_token
from . import v1_bp


@v1_bp.route("/businesses/<org_id>/preview-tokens", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def create_preview_token_route(org_id):
    data = request.get_json(silent=True) or {}

    page_id = data.get("page_id")
    if not page_id:
        raise ValidationError("page_id is required")

    token_id = create_preview_token(
        g.store,
        org_id=org_id,
        page_id=page_id,
        section_id=data.get("section_id"),
        user_id=g.current_user.id,
        ttl_hours=data.get("expires_in_hours"),
    )
    token = resolve_preview_token(g.store, token_id)

    return jsonify(normalize_preview_token(token)), 201
