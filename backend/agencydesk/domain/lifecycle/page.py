from copy import deepcopy
from typing import Any, Iterable, Mapping, Set

PAGE_STATUSES: Set[str] = {"draft", "dirty", "published"}

# "draft" marks a section that has never been published.
SECTION_STATUSES: Set[str] = {"draft", "dirty", "published"}
UNPUBLISHED_SECTION_STATUSES: Set[str] = {"draft", "dirty"}


def json_equal(left: Any, right: Any) -> bool:
    """Deep JSON equality; unlike ``==``, ``True`` differs from ``1`` and ``1`` from ``1.0``."""
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            json_equal(left[key], right[key]) for key in left
        )

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return len(left) == len(right) and all(map(json_equal, left, right))

    return type(left) is type(right) and left == right


def section_status_for(draft_content: Any, published_content: Mapping | None) -> str:
    """
    Status a section should carry for the given draft.

    Deep JSON value equality against the published snapshot; a missing
    snapshot counts as an empty object.
    """
    return "published" if json_equal(draft_content, published_content or {}) else "dirty"


def all_sections_published(sections: Iterable[Any]) -> bool:
    return all(section.status == "published" for section in sections)


def promote_draft(section) -> None:
    section.published_content = deepcopy(section.draft_content)
    section.status = "published"


def revert_draft(section) -> None:
    section.draft_content = deepcopy(section.published_content or {})
    section.status = "published"
