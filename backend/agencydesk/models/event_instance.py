from agencydesk.extensions import db
from .base import BaseModel

class EventInstance(BaseModel):
    __tablename__ = "event_instances"

    event_id = db.Column(db.String(36), db.ForeignKey("events.id"), nullable=False, index=True)
    instance_date = db.Column(db.Date, nullable=False)
    custom_description = db.Column(db.Text, nullable=True)
    custom_image_url = db.Column(db.String(512), nullable=True)
    status = db.Column(db.String(20), nullable=False, default="draft")
    # draft | published | cancelled

    event = db.relationship("Event", back_populates="instances")

    __table_args__ = (
        db.UniqueConstraint("event_id", "instance_date", name="uq_event_instance_date"),
    )
