from flask import g

from storefront.models.domain_mapping import DomainMapping
from storefront.models.page import Page


def tenant_page_or_404(page_id):
    return Page.query.filter_by(
        id=page_id,
        tenant_id=g.current_tenant.id,
    ).first_or_404()


def tenant_domain_or_404(domain_id):
    return DomainMapping.query.filter_by(
        id=domain_id,
        tenant_id=g.current_tenant.id,
    ).first_or_404()
