import logging

from storefront.extensions import db
from storefront.models.page import Page
from storefront.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_page(*, page: Page) -> None:
    """
    Hard-delete a page. Its sections go with it through the
    ``delete-orphan`` cascade.
    """
    page_id = page.id

    with transactional():
        db.session.delete(page)

    logger.info("Deleted page %s", page_id)
