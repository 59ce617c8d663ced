from agencydesk.extensions import db
from .base import BaseModel
from .org_mixin import OrgMixin

class Event(BaseModel, OrgMixin):
    __tablename__ = "events"

    title = db.Column(db.String(255), nullable=False)
    short_description = db.Column(db.String(500), nullable=True)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    event_type = db.Column(db.String(100), nullable=True)

    starts_at = db.Column(db.DateTime, nullable=False)
    ends_at = db.Column(db.DateTime, nullable=False)
    publish_start_at = db.Column(db.DateTime, nullable=True)
    publish_end_at = db.Column(db.DateTime, nullable=True)

    status = db.Column(db.String(20), nullable=False, default="draft")
    # draft | scheduled | live | past | archived
    is_featured = db.Column(db.Boolean, nullable=False, default=False)

    instances = db.relationship(
        "EventInstance",
        back_populates="event",
        order_by="EventInstance.instance_date",
        cascade="all, delete-orphan"
    )
