from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from agencydesk.utils.decorators import org_member_required, roles_required, ADMIN_ROLES
from agencydesk.utils.pagination import paginate_cursor, parse_limit
from agencydesk.models.audit_log import AuditLog
from agencydesk.normalizers.audit import normalize_audit_log
from agencydesk.normalizers.pagination import normalize_pagination
from . import v1_bp


@v1_bp.route("/businesses/<org_id>/audit", methods=["GET"])
@jwt_required()
@org_member_required
@roles_required(*ADMIN_ROLES)
def list_audit_logs(org_id):
    query = g.store.query(AuditLog)

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(
        query,
        model=AuditLog,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
