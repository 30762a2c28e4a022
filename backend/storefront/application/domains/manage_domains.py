import logging
import secrets
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from storefront.extensions import db
from storefront.models.domain_mapping import DomainMapping
from storefront.domain.invariants.exceptions import ValidationError
from storefront.utils.transaction import transactional
from storefront.validation.domains import normalize_hostname, validate_domain_create

logger = logging.getLogger(__name__)


def create_domain(*, tenant_id: str, data, platform_domains=(), target: str) -> DomainMapping:
    """
    Attach a custom hostname to a store. The mapping starts ``pending`` and
    does not route traffic until verified.
    """
    errors = validate_domain_create(data, platform_domains=platform_domains)
    if errors:
        raise ValidationError(errors)

    mapping = DomainMapping()
    mapping.tenant_id = tenant_id
    mapping.hostname = normalize_hostname(data["hostname"])
    mapping.status = "pending"
    mapping.verification_method = data.get("verification_method", "txt")
    mapping.verification_token = secrets.token_hex(16)
    mapping.expected_target = target
    mapping.is_active = True

    try:
        with transactional():
            db.session.add(mapping)
    except IntegrityError as exc:
        raise ValidationError(
            [{"field": "hostname", "message": "This domain is already attached to a store"}]
        ) from exc

    logger.info("Domain %s attached to tenant %s", mapping.hostname, tenant_id)
    return mapping


def verify_domain(*, mapping: DomainMapping, verifier, resolver=None) -> DomainMapping:
    result = verifier.verify(mapping)

    with transactional():
        if result.success:
            mapping.status = "verified"
            mapping.verified_at = datetime.now(timezone.utc)
            mapping.last_error = None
        else:
            mapping.status = "failed"
            mapping.last_error = (result.error or "Expected DNS record not found")[:255]

    if resolver is not None:
        resolver.invalidate(mapping.hostname)

    logger.info("Domain %s verification: %s", mapping.hostname, mapping.status)
    return mapping


def detach_domain(*, mapping: DomainMapping, resolver=None) -> None:
    hostname = mapping.hostname

    with transactional():
        db.session.delete(mapping)

    if resolver is not None:
        resolver.invalidate(hostname)

    logger.info("Domain %s detached", hostname)
