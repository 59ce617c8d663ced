from agencydesk.extensions import db
from .base import BaseModel
from .org_mixin import OrgMixin

class Page(BaseModel, OrgMixin):
    __tablename__ = 'pages'

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    template = db.Column(db.String(100), nullable=True)
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)
    # draft | dirty | published

    __table_args__ = (
        db.UniqueConstraint("org_id", "slug", name="uq_page_slug_per_org"),
    )

    # Relationship to Sections (ordered, cascade deletes)
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.position",
        cascade="all, delete-orphan"
    )
