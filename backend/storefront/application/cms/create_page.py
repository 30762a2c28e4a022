from typing import Any, Dict
import logging

from sqlalchemy.exc import IntegrityError
from storefront.extensions import db
from storefront.models.page import Page
from storefront.domain.invariants.page import assert_page
from storefront.domain.invariants.exceptions import ValidationError
from storefront.utils.transaction import transactional
from storefront.validation.pages import validate_page_create

logger = logging.getLogger(__name__)


def create_page(
    *,
    tenant_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Create a new sellpage or homepage in DRAFT state, without sections.

    Edge cases handled:
    - Missing or malformed fields
    - Duplicate slug per tenant
    """
    errors = validate_page_create(data)
    if errors:
        raise ValidationError(errors)

    page = Page()
    page.tenant_id = tenant_id
    page.kind = data.get("kind", "sellpage")
    page.title = data["title"].strip()
    page.slug = data["slug"]
    page.status = "draft"
    page.seo = data.get("seo") or {}

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            assert_page(page)

        logger.info("Created %s %s for tenant %s", page.kind, page.slug, tenant_id)
        return page

    except IntegrityError as exc:
        # Unique constraint on (tenant_id, slug)
        raise ValidationError(
            [{"field": "slug", "message": "A page with this slug already exists"}]
        ) from exc
