from agencydesk.domain.exceptions import InvariantViolation
from agencydesk.domain.lifecycle.page import PAGE_STATUSES
from .section import assert_section

def assert_page_status(status):
    if status not in PAGE_STATUSES:
        raise InvariantViolation(
            f"Invalid page status: {status!r}. Expected one of {sorted(PAGE_STATUSES)}"
        )

def assert_page(page, sections=None):
    if not page.name or not page.slug:
        raise InvariantViolation("Page must have a name and a slug.")

    assert_page_status(page.status)

    positions = [section.position for section in sections or []]
    if len(set(positions)) != len(positions):
        raise InvariantViolation(
            f"Section positions must be unique within a page: {positions}"
        )

    for section in sections or []:
        assert_section(section)
