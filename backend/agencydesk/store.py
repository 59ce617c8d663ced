# agencydesk/store.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from agencydesk.domain.exceptions import Forbidden
from agencydesk.extensions import db


@dataclass(frozen=True)
class StoreContext:
    """
    Handle passed to every application operation.

    Carries the caller's trust level. A user context only ever sees rows of
    its own organization; a service context is unrestricted and is meant for
    the public site renderer and maintenance jobs.
    """

    org_id: Optional[str] = None
    user_id: Optional[str] = None
    role: Optional[str] = None
    elevated: bool = False

    @classmethod
    def for_user(cls, *, org_id: str, user_id: str, role: str) -> "StoreContext":
        if not org_id:
            raise ValueError("A user context requires an org_id")
        return cls(org_id=org_id, user_id=user_id, role=role, elevated=False)

    @classmethod
    def service(cls) -> "StoreContext":
        return cls(elevated=True)

    @property
    def session(self):
        return db.session

    def query(self, model: Any):
        """Query ``model`` restricted to what this context may read."""
        return self.scope(model.query, model)

    def scope(self, query, model: Any):
        if self.elevated or not hasattr(model, "org_id"):
            return query
        return query.filter(model.org_id == self.org_id)

    def can_access_org(self, org_id: Optional[str]) -> bool:
        return self.elevated or org_id == self.org_id

    def require_org(self) -> str:
        """Organization a write lands in; service contexts have none."""
        if not self.org_id:
            raise Forbidden("This operation requires an organization context")
        return self.org_id
