def normalize_section(section):
    """Works for both section rows and builder ``Section`` records."""
    return {
        "id": section.id,
        "type": section.type,
        "position": section.position,
        "visible": bool(section.visible),
        "config": section.config or {}
    }
