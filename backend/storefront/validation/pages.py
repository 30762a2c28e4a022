from typing import Any, Dict, List

from storefront.domain.lifecycle.page import PAGE_STATUSES
from storefront.models.page import PAGE_KINDS
from .common import error, is_slug

UPDATABLE_PAGE_FIELDS = ("title", "slug", "seo")


def validate_page_create(data: Any) -> List[Dict[str, str]]:
    if not isinstance(data, dict):
        return [error("body", "must be a JSON object")]

    errors = []

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        errors.append(error("title", "is required"))
    elif len(title) > 200:
        errors.append(error("title", "must be at most 200 characters"))

    if not is_slug(data.get("slug")):
        errors.append(error("slug", "must be lowercase letters, digits and dashes"))

    kind = data.get("kind", "sellpage")
    if kind not in PAGE_KINDS:
        errors.append(error("kind", f"must be one of {', '.join(PAGE_KINDS)}"))

    if "seo" in data and not isinstance(data["seo"], dict):
        errors.append(error("seo", "must be an object"))

    return errors


def validate_page_update(data: Any) -> List[Dict[str, str]]:
    if not isinstance(data, dict):
        return [error("body", "must be a JSON object")]

    errors = []

    if not any(field in data for field in UPDATABLE_PAGE_FIELDS):
        errors.append(error("body", f"provide at least one of {', '.join(UPDATABLE_PAGE_FIELDS)}"))

    if "title" in data and (not isinstance(data["title"], str) or not data["title"].strip()):
        errors.append(error("title", "must be a non-empty string"))

    if "slug" in data and not is_slug(data["slug"]):
        errors.append(error("slug", "must be lowercase letters, digits and dashes"))

    if "seo" in data and not isinstance(data["seo"], dict):
        errors.append(error("seo", "must be an object"))

    return errors


def validate_page_status(data: Any) -> List[Dict[str, str]]:
    if not isinstance(data, dict) or data.get("status") not in PAGE_STATUSES:
        return [error("status", f"must be one of {', '.join(PAGE_STATUSES)}")]
    return []
