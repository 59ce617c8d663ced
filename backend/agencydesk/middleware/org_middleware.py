from flask import g
from agencydesk.domain.exceptions import NotFound
from agencydesk.models.business import Business

def org_middleware(app):
    @app.before_request
    def reset_org():
        # Resolved per route, after authentication
        g.current_org = None

def resolve_org(org_id):
    """Load the active business for ``org_id`` into g.current_org."""
    org = Business.query.filter_by(id=org_id, is_active=True).first() if org_id else None
    if not org:
        raise NotFound("Business not found")

    g.current_org = org
    return org
