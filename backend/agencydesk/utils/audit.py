from flask import has_app_context
from agencydesk.extensions import db
from agencydesk.models.audit_log import AuditLog
from typing import Optional

def log_action(
    ctx,
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    org_id: Optional[str] = None,
    payload: dict | None = None
):
    org_id = org_id or ctx.org_id
    if not has_app_context() or not org_id:
        return  # Nothing to attribute the entry to
    log = AuditLog()

    log.actor_id = ctx.user_id
    log.org_id = org_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)
