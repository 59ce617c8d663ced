# agencydesk/api/v1/sections.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from agencydesk.utils.decorators import (
    org_member_required,
    roles_required,
    feature_enabled,
    WRITE_ROLES,
)
from agencydesk.utils.optimistic_lock import enforce_optimistic_lock
from agencydesk.application.cms.queries import get_section
from agencydesk.application.cms.update_section_draft import update_section_draft
from agencydesk.application.cms.publish_section import publish_section
from agencydesk.application.cms.discard_section import discard_section_changes
from agencydesk.application.cms.delete_section import delete_section
from agencydesk.domain.exceptions import ValidationError
from agencydesk.domain.section_schemas import validate_section_content
from agencydesk.normalizers.section import normalize_section
from . import v1_bp


@v1_bp.route("/businesses/<org_id>/sections/<section_id>/draft", methods=["PUT"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def update_section_draft_route(org_id, section_id):
    section = get_section(g.store, section_id)

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(section)

    data = request.get_json(silent=True) or {}
    if "draft_content" not in data:
        raise ValidationError("draft_content is required")

    section = update_section_draft(
        g.store,
        section_id=section.id,
        draft_content=data["draft_content"],
    )

    return jsonify({"section": normalize_section(section, admin=True)}), 200


@v1_bp.route("/businesses/<org_id>/sections/<section_id>/publish", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def publish_section_route(org_id, section_id):
    section = get_section(g.store, section_id)

    # Refuse to publish content the site templates cannot render
    validate_section_content(section.component, section.draft_content)

    section = publish_section(g.store, section_id=section.id)

    return jsonify({"section": normalize_section(section, admin=True)}), 200


@v1_bp.route("/businesses/<org_id>/sections/<section_id>/discard", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def discard_section_route(org_id, section_id):
    section = discard_section_changes(g.store, section_id=section_id)

    return jsonify({"section": normalize_section(section, admin=True)}), 200


@v1_bp.route("/businesses/<org_id>/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def delete_section_route(org_id, section_id):
    delete_section(g.store, section_id=section_id)

    return jsonify({"message": "Section deleted and positions re-compacted"}), 200
