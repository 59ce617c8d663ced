from agencydesk.extensions import db

class OrgMixin:
    org_id = db.Column(
        db.String(36),
        db.ForeignKey('businesses.id'),
        nullable=False,
        index=True
    )
