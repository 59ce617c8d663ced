from agencydesk.domain.exceptions import InvariantViolation
from agencydesk.domain.lifecycle.page import SECTION_STATUSES, section_status_for

def assert_section(section):
    if section.status not in SECTION_STATUSES:
        raise InvariantViolation(f"Invalid section status: {section.status!r}")

    if not isinstance(section.draft_content, dict):
        raise InvariantViolation("Section draft_content must be an object.")

    # A never-published section keeps its own status until it is written or published.
    if section.status == "draft":
        return

    expected = section_status_for(section.draft_content, section.published_content)
    if section.status != expected:
        raise InvariantViolation(
            f"Section {section.id} is {section.status!r} but its content says {expected!r}"
        )
