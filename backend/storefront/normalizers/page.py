from storefront.domain.lifecycle.page import allowed_transitions
from .section import normalize_section


def normalize_page(page, admin=False, include_sections=True):
    data = {
        "id": page.id,
        "kind": page.kind,
        "title": page.title,
        "slug": page.slug,
        "seo": page.seo or {},
    }

    if admin:
        data["status"] = page.status
        data["updated_at"] = page.updated_at.isoformat() if page.updated_at else None
        data["allowed_transitions"] = list(allowed_transitions(page.status))

    if include_sections:
        sections = sorted(page.sections, key=lambda s: s.position)
        data["sections"] = [normalize_section(s) for s in sections]

    return data


def normalize_render_payload(page, tenant):
    """
    Payload handed to the storefront renderer. Hidden sections stay in the
    list; filtering them is the renderer's call.
    """
    sections = sorted(page.sections, key=lambda s: s.position)

    return {
        "sections": [normalize_section(s) for s in sections],
        "page_context": {
            "store": {
                "name": tenant.name,
                "slug": tenant.slug,
            },
            "page": normalize_page(page, include_sections=False),
        },
    }
