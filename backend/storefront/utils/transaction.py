import logging
from contextlib import contextmanager

from storefront.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """Commit on success; roll back and re-raise on any error."""
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        logger.debug("Rolling back transaction after %s", exc.__class__.__name__)
        db.session.rollback()
        raise
