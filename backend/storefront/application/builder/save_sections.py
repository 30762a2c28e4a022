from typing import Any, Dict, List

from storefront.catalog.sections import default_config
from storefront.domain.builder.section_store import SectionStore
from storefront.domain.invariants.exceptions import ValidationError
from storefront.validation.sections import validate_builder_ops, validate_section_list


def open_builder(page, gateway) -> SectionStore:
    """Start an editing session holding the page's stored sections."""
    store = SectionStore(page.id, gateway)
    store.load(gateway.load_sections(page.id))
    return store


def save_sections(*, page, gateway, sections: Any) -> List[Dict[str, Any]]:
    """
    Replace a page's sections with a list edited client-side.

    The list is run through a builder session so positions come out dense
    no matter what the client sent.
    """
    errors = validate_section_list(sections, page_kind=page.kind)
    if errors:
        raise ValidationError(errors)

    def sort_key(pair):
        index, item = pair
        position = item.get("position")
        return (position if isinstance(position, int) else index, index)

    ordered = sorted(enumerate(sections), key=sort_key)

    store = SectionStore(page.id, gateway)
    store.load(item for _, item in ordered)
    return store.save()


def apply_section_ops(*, page, gateway, ops: Any) -> SectionStore:
    """
    Replay a batch of builder operations against the stored sections, then
    save the result.

    Operations that point at unknown ids or out-of-range indices are no-ops,
    the same as in the editor.
    """
    errors = validate_builder_ops(ops, page_kind=page.kind)
    if errors:
        raise ValidationError(errors)

    store = open_builder(page, gateway)

    for op in ops:
        name = op["op"]

        if name == "add":
            config = op["config"] if "config" in op else default_config(op["type"])
            store.add(op["type"], config)
        elif name == "remove":
            store.remove(op["id"])
        elif name == "update_config":
            store.update_config(op["id"], op["config"])
        elif name == "toggle_visibility":
            store.toggle_visibility(op["id"])
        elif name == "move":
            store.move(op["from"], op["to"])
        elif name == "duplicate":
            store.duplicate(op["id"])

    if store.is_dirty:
        store.save()

    return store
