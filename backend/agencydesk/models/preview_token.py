from agencydesk.extensions import db
from .base import BaseModel
from .org_mixin import OrgMixin

class PreviewToken(BaseModel, OrgMixin):
    """Unauthenticated read capability on a page's drafts until expires_at."""
    __tablename__ = "preview_tokens"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False, index=True)
    section_id = db.Column(db.String(36), db.ForeignKey("page_sections_v2.id"), nullable=True)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
