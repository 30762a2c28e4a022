from .section import assert_section, assert_section_positions
from .exceptions import InvariantViolation


def assert_page(page, publish=False):
    sections = page.sections

    if publish and not sections:
        raise InvariantViolation("Cannot publish a page without any sections configured.")

    assert_section_positions(sections)

    for section in sections:
        assert_section(section)
