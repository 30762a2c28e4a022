from typing import Dict

from storefront.models.page import Page
from storefront.domain.invariants.page import assert_page
from storefront.domain.invariants.exceptions import ValidationError
from storefront.domain.lifecycle.page import assert_page_transition
from storefront.utils.transaction import transactional
from storefront.validation.pages import validate_page_status


def change_page_status(*, page: Page, data) -> Dict[str, str]:
    """
    Moves a page through draft / published / archived.

    Publishing re-checks the page invariants, including that it has at
    least one section.
    """
    errors = validate_page_status(data)
    if errors:
        raise ValidationError(errors)

    to_status = data["status"]

    with transactional():
        assert_page_transition(from_status=page.status, to_status=to_status)

        page.status = to_status

        assert_page(page, publish=to_status == "published")

    return {
        "page_id": page.id,
        "status": page.status,
    }
