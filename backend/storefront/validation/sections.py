"""
Validation for section payloads coming through the admin API.

Each function returns a list of ``{"field", "message"}`` errors; an empty
list means the payload is acceptable.
"""
from typing import Any, Dict, List, Optional

from storefront.catalog.sections import allowed_section_types
from .common import error

BUILDER_OPS = {"add", "remove", "update_config", "toggle_visibility", "move", "duplicate"}


def validate_section(data: Any, field: str = "section", page_kind: Optional[str] = None) -> List[Dict[str, str]]:
    if not isinstance(data, dict):
        return [error(field, "must be an object")]

    errors = []

    section_id = data.get("id")
    if section_id is not None and (not isinstance(section_id, str) or not section_id or len(section_id) > 64):
        errors.append(error(f"{field}.id", "must be a non-empty string of at most 64 characters"))

    section_type = data.get("type")
    if not isinstance(section_type, str) or not section_type:
        errors.append(error(f"{field}.type", "is required"))
    elif page_kind and section_type not in allowed_section_types(page_kind):
        errors.append(error(f"{field}.type", f"'{section_type}' is not available on a {page_kind}"))

    position = data.get("position")
    if position is not None and (isinstance(position, bool) or not isinstance(position, int) or position < 0):
        errors.append(error(f"{field}.position", "must be a non-negative integer"))

    if "visible" in data and not isinstance(data["visible"], bool):
        errors.append(error(f"{field}.visible", "must be a boolean"))

    if "config" in data and not isinstance(data["config"], dict):
        errors.append(error(f"{field}.config", "must be an object"))

    return errors


def validate_section_list(data: Any, page_kind: Optional[str] = None) -> List[Dict[str, str]]:
    if not isinstance(data, list):
        return [error("sections", "must be a list")]

    errors = []
    seen_ids = set()

    for index, item in enumerate(data):
        errors.extend(validate_section(item, field=f"sections[{index}]", page_kind=page_kind))

        section_id = item.get("id") if isinstance(item, dict) else None
        if isinstance(section_id, str) and section_id:
            if section_id in seen_ids:
                errors.append(error(f"sections[{index}].id", f"duplicate id '{section_id}'"))
            seen_ids.add(section_id)

    return errors


def _is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_builder_ops(data: Any, page_kind: Optional[str] = None) -> List[Dict[str, str]]:
    """
    Checks the shape of each operation only. Semantic misses (unknown ids,
    out-of-range indices) are left to the builder, which ignores them.
    """
    if not isinstance(data, list):
        return [error("ops", "must be a list")]

    errors = []
    for index, op in enumerate(data):
        field = f"ops[{index}]"

        if not isinstance(op, dict):
            errors.append(error(field, "must be an object"))
            continue

        name = op.get("op")
        if name not in BUILDER_OPS:
            errors.append(error(f"{field}.op", f"must be one of {', '.join(sorted(BUILDER_OPS))}"))
            continue

        if name == "add":
            section_type = op.get("type")
            if not isinstance(section_type, str) or not section_type:
                errors.append(error(f"{field}.type", "is required"))
            elif page_kind and section_type not in allowed_section_types(page_kind):
                errors.append(error(f"{field}.type", f"'{section_type}' is not available on a {page_kind}"))
            if "config" in op and not isinstance(op["config"], dict):
                errors.append(error(f"{field}.config", "must be an object"))

        elif name == "move":
            if not _is_index(op.get("from")) or not _is_index(op.get("to")):
                errors.append(error(field, "'from' and 'to' must be integers"))

        else:
            if not isinstance(op.get("id"), str) or not op.get("id"):
                errors.append(error(f"{field}.id", "is required"))
            if name == "update_config" and not isinstance(op.get("config"), dict):
                errors.append(error(f"{field}.config", "must be an object"))

    return errors
