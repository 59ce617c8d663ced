from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity
from agencydesk.models.membership import Membership
from agencydesk.models.user import User
from agencydesk.middleware.org_middleware import resolve_org
from agencydesk.store import StoreContext

READ_ROLES = ("owner", "admin", "editor", "viewer")
WRITE_ROLES = ("owner", "admin", "editor")
ADMIN_ROLES = ("owner", "admin")

def org_member_required(fn):
    """
    Resolve <org_id> into g.current_org, then the caller's role in it, and
    build the caller's StoreContext.

    Must run after @jwt_required(). Super admins act as admins everywhere.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        org = resolve_org(kwargs.get("org_id"))

        user = User.query.filter_by(id=get_jwt_identity(), is_active=True).first()
        if not user:
            return jsonify({"error": "Unauthorized"}), 401

        if user.is_super_admin:
            role = "admin"
        else:
            membership = Membership.query.filter_by(org_id=org.id, user_id=user.id).first()
            if not membership:
                return jsonify({"error": "Forbidden"}), 403
            role = membership.role

        g.current_user = user
        g.current_role = role
        g.store = StoreContext.for_user(org_id=org.id, user_id=user.id, role=role)

        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if getattr(g, "current_role", None) not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def feature_enabled(feature_name):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            org = g.current_org

            if not hasattr(org, f"enable_{feature_name}"):
                return jsonify({"error": "Feature not recognized"}), 400

            if not org.has_feature(feature_name):
                return jsonify({
                    "error": f"Feature '{feature_name}' is disabled for this business"
                }), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
