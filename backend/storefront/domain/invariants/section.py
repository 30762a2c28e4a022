from .exceptions import InvariantViolation


def assert_section_positions(sections):
    positions = [section.position for section in sections]
    expected = list(range(len(positions)))

    if sorted(positions) != expected:
        raise InvariantViolation(
            f"Section positions are not consecutive starting from 0: {positions}"
        )


def assert_section(section):
    if not section.type:
        raise InvariantViolation("Section must have a type.")

    if not isinstance(section.config, dict):
        raise InvariantViolation(
            f"Section {section.id} config must be a mapping."
        )
