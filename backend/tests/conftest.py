from __future__ import annotations

import copy

import pytest
from flask_jwt_extended import create_access_token

from storefront import create_app
from storefront.domain.builder.section import Section
from storefront.domain.invariants.exceptions import PersistenceError
from storefront.extensions import db
from storefront.models.domain_mapping import DomainMapping
from storefront.models.page import Page
from storefront.models.tenant import Tenant


class InMemoryGateway:
    """Section gateway double keeping saved lists per page id."""

    def __init__(self, fail_with: str | None = None):
        self.pages: dict = {}
        self.calls: list = []
        self.fail_with = fail_with

    def load_sections(self, page_id):
        return [Section.from_mapping(s) for s in self.pages.get(page_id, [])]

    def save_sections(self, page_id, sections):
        self.calls.append((page_id, copy.deepcopy(list(sections))))
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        self.pages[page_id] = copy.deepcopy(list(sections))


@pytest.fixture
def gateway():
    return InMemoryGateway()


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def tenant(app):
    tenant = Tenant(name="Acme", slug="acme", is_active=True)
    db.session.add(tenant)
    db.session.commit()
    return tenant


@pytest.fixture
def other_tenant(app):
    tenant = Tenant(name="Globex", slug="globex", is_active=True)
    db.session.add(tenant)
    db.session.commit()
    return tenant


def make_headers(tenant, role="admin"):
    token = create_access_token(
        identity="user-1",
        additional_claims={"tenant_id": tenant.id, "role": role},
    )
    return {
        "Authorization": f"Bearer {token}",
        "X-Tenant-ID": tenant.id,
    }


@pytest.fixture
def auth_headers(tenant):
    return make_headers(tenant)


def make_page(tenant, slug="summer-sale", kind="sellpage", status="draft", title="Summer Sale"):
    page = Page(tenant_id=tenant.id, slug=slug, kind=kind, status=status, title=title, seo={})
    db.session.add(page)
    db.session.commit()
    return page


def make_domain(tenant, hostname="shop.other.com", status="verified", is_active=True):
    mapping = DomainMapping(
        tenant_id=tenant.id,
        hostname=hostname,
        status=status,
        verification_method="txt",
        verification_token="token-123",
        expected_target="127.0.0.1",
        is_active=is_active,
    )
    db.session.add(mapping)
    db.session.commit()
    return mapping
