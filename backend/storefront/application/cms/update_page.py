from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from storefront.models.page import Page
from storefront.domain.invariants.page import assert_page
from storefront.domain.invariants.exceptions import ValidationError
from storefront.utils.transaction import transactional
from storefront.validation.pages import UPDATABLE_PAGE_FIELDS, validate_page_update


def update_page(
    *,
    page: Page,
    data: Dict[str, Any],
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    - Invariants always revalidated
    """
    errors = validate_page_update(data)
    if errors:
        raise ValidationError(errors)

    changed_fields: list[str] = []

    try:
        with transactional():
            for field in UPDATABLE_PAGE_FIELDS:
                if field in data and getattr(page, field) != data[field]:
                    setattr(page, field, data[field])
                    changed_fields.append(field)

            if not changed_fields:
                # Explicitly fail instead of silently succeeding
                raise ValidationError(
                    [{"field": "body", "message": "No field differs from the stored page"}]
                )

            assert_page(page)

    except IntegrityError as exc:
        raise ValidationError(
            [{"field": "slug", "message": "A page with this slug already exists"}]
        ) from exc

    return page
