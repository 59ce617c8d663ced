# agencydesk/api/v1/pages.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from agencydesk.utils.decorators import (
    org_member_required,
    roles_required,
    feature_enabled,
    READ_ROLES,
    WRITE_ROLES,
)
from agencydesk.application.cms.queries import get_page, list_pages, get_sections_for_page
from agencydesk.application.cms.create_page import create_page
from agencydesk.application.cms.update_page import update_page
from agencydesk.application.cms.create_section import create_section
from agencydesk.application.cms.reorder_sections import reorder_sections
from agencydesk.application.cms.publish_all_sections import publish_all_sections_for_page
from agencydesk.application.cms.discard_all_sections import discard_all_sections_for_page
from agencydesk.normalizers.page import normalize_page
from agencydesk.normalizers.section import normalize_section
from agencydesk.normalizers.pagination import normalize_pagination
from . import v1_bp


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/businesses/<org_id>/pages", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("cms")
def list_pages_route(org_id):
    status = request.args.get("status")  # draft | dirty | published | None
    page_num = max(request.args.get("page", 1, type=int), 1)
    per_page = min(max(request.args.get("per_page", 20, type=int), 1), 100)

    pages = list_pages(g.store, status=status)
    start = (page_num - 1) * per_page

    return jsonify(
        normalize_pagination(
            pages[start:start + per_page],
            lambda p: normalize_page(p, admin=True),
            page=page_num,
            per_page=per_page,
            total=len(pages),
        )
    )


@v1_bp.route("/businesses/<org_id>/pages", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def create_page_route(org_id):
    data = request.get_json(silent=True) or {}
    page = create_page(g.store, data=data)

    return jsonify({"page": normalize_page(page, admin=True)}), 201


@v1_bp.route("/businesses/<org_id>/pages/<page_id>", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("cms")
def get_page_route(org_id, page_id):
    page = get_page(g.store, page_id)
    use_draft = request.args.get("draft") in ("1", "true")

    return jsonify({
        "page": normalize_page(
            page,
            admin=True,
            sections=get_sections_for_page(g.store, page.id),
            use_draft=use_draft,
        )
    })


@v1_bp.route("/businesses/<org_id>/pages/<page_id>", methods=["PUT"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def update_page_route(org_id, page_id):
    data = request.get_json(silent=True) or {}
    page = update_page(g.store, page_id=page_id, data=data)

    return jsonify({"page": normalize_page(page, admin=True)}), 200


# ------------------------
# Sections of a page
# ------------------------

@v1_bp.route("/businesses/<org_id>/pages/<page_id>/sections", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*READ_ROLES)
@feature_enabled("cms")
def list_sections_route(org_id, page_id):
    page = get_page(g.store, page_id)
    sections = get_sections_for_page(g.store, page.id)

    return jsonify({"sections": [normalize_section(s, admin=True) for s in sections]})


@v1_bp.route("/businesses/<org_id>/pages/<page_id>/sections", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def create_section_route(org_id, page_id):
    data = request.get_json(silent=True) or {}
    section = create_section(g.store, page_id=page_id, data=data)

    return jsonify({"section": normalize_section(section, admin=True)}), 201


@v1_bp.route("/businesses/<org_id>/pages/<page_id>/sections/reorder", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def reorder_sections_route(org_id, page_id):
    data = request.get_json(silent=True)  # [{id: "...", position: 1}, ...]
    sections = reorder_sections(g.store, page_id=page_id, items=data)

    return jsonify({"sections": [normalize_section(s, admin=True) for s in sections]}), 200


# ------------------------
# Page-wide publish / discard
# ------------------------

@v1_bp.route("/businesses/<org_id>/pages/<page_id>/publish-all", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def publish_all_route(org_id, page_id):
    result = publish_all_sections_for_page(g.store, page_id=page_id)

    return jsonify({"success": True, **result.to_dict()}), 200


@v1_bp.route("/businesses/<org_id>/pages/<page_id>/discard-all", methods=["POST"])
@jwt_required()
@org_member_required
@roles_required(*WRITE_ROLES)
@feature_enabled("cms")
def discard_all_route(org_id, page_id):
    result = discard_all_sections_for_page(g.store, page_id=page_id)

    return jsonify({
        "success": True,
        "discarded": len(result.succeeded),
        **result.to_dict(),
    }), 200
