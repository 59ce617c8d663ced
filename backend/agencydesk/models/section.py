from agencydesk.extensions import db
from .base import BaseModel
from .org_mixin import OrgMixin

class Section(BaseModel, OrgMixin):
    __tablename__ = "page_sections_v2"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False, index=True)
    key = db.Column(db.String(100), nullable=False)
    label = db.Column(db.String(200), nullable=False)
    component = db.Column(db.String(100), nullable=False)  # HeroSection, InfoBar, ...
    position = db.Column(db.Integer, nullable=False, default=1)

    draft_content = db.Column(db.JSON, nullable=False, default=dict)
    published_content = db.Column(db.JSON, nullable=False, default=dict)
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    # draft | dirty | published

    page = db.relationship("Page", back_populates="sections")

    __table_args__ = (
        db.UniqueConstraint("page_id", "key", name="uq_section_key_per_page"),
        db.Index("idx_section_page_position", "page_id", "position"),
    )
