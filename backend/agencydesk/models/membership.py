from agencydesk.extensions import db
from .base import BaseModel
from .org_mixin import OrgMixin

MEMBER_ROLES = {"owner", "admin", "editor", "viewer"}

class Membership(BaseModel, OrgMixin):
    __tablename__ = "memberships"

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    role = db.Column(db.String(50), nullable=False, default="viewer")

    __table_args__ = (
        db.UniqueConstraint("org_id", "user_id", name="uq_membership_org_user"),
    )
