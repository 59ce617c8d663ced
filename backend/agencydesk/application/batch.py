# agencydesk/application/batch.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass
class BatchResult:
    """
    Outcome of a best-effort batch.

    Items are applied independently; a failed item never aborts the rest.
    """

    succeeded: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "succeeded": list(self.succeeded),
            "failed": [{"id": item_id, "error": error} for item_id, error in self.failed],
        }
