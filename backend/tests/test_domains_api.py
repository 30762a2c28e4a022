"""
Tests for custom domain management, the public lookup endpoint, and
SQL-backed routing end to end.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from conftest import make_domain, make_page
from storefront.domain.routing.classification import NotFound, Tenant
from storefront.extensions import db
from storefront.gateways.domain_verifier import VerificationResult
from storefront.models.section import Section


def test_create_domain_starts_pending(client, tenant, auth_headers) -> None:
    response = client.post(
        "/api/v1/domains",
        json={"hostname": "Shop.Other.com."},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["hostname"] == "shop.other.com"
    assert body["status"] == "pending"
    assert body["dns_record"]["type"] == "TXT"
    assert body["dns_record"]["name"] == "_storefront-verify.shop.other.com"
    assert body["dns_record"]["value"]


@pytest.mark.parametrize("payload,field", [
    ({"hostname": "not a domain"}, "hostname"),
    ({"hostname": "admin.example.com"}, "hostname"),
    ({"hostname": "shop.other.com", "verification_method": "cname"}, "verification_method"),
])
def test_create_domain_validation(client, tenant, auth_headers, payload, field) -> None:
    response = client.post("/api/v1/domains", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == field


def test_duplicate_domain_rejected(client, tenant, other_tenant, auth_headers) -> None:
    make_domain(other_tenant, hostname="shop.other.com")
    response = client.post("/api/v1/domains", json={"hostname": "shop.other.com"}, headers=auth_headers)
    assert response.status_code == 400


def test_verify_domain_updates_status_and_cache(app, client, tenant, auth_headers) -> None:
    mapping = make_domain(tenant, status="pending")
    verifier = MagicMock()
    verifier.verify.return_value = VerificationResult(success=True, records=["token-123"])
    app.extensions["domain_verifier"] = verifier

    resolver = app.extensions["domain_resolver"]
    assert resolver.classify("shop.other.com") == NotFound()

    response = client.post(f"/api/v1/domains/{mapping.id}/verify", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["status"] == "verified"
    assert resolver.cached("shop.other.com") is None
    assert resolver.classify("shop.other.com") == Tenant("acme")


def test_failed_verification_records_error(app, client, tenant, auth_headers) -> None:
    mapping = make_domain(tenant, status="pending")
    verifier = MagicMock()
    verifier.verify.return_value = VerificationResult(success=False, records=[], error="NXDOMAIN")
    app.extensions["domain_verifier"] = verifier

    body = client.post(f"/api/v1/domains/{mapping.id}/verify", headers=auth_headers).get_json()

    assert body["status"] == "failed"
    assert body["last_error"] == "NXDOMAIN"


def test_detach_domain(app, client, tenant, auth_headers) -> None:
    mapping = make_domain(tenant)
    resolver = app.extensions["domain_resolver"]
    assert resolver.classify("shop.other.com") == Tenant("acme")

    response = client.delete(f"/api/v1/domains/{mapping.id}", headers=auth_headers)

    assert response.status_code == 204
    assert resolver.classify("shop.other.com") == NotFound()


def test_list_domains(client, tenant, other_tenant, auth_headers) -> None:
    make_domain(tenant, hostname="a.shop")
    make_domain(other_tenant, hostname="b.shop")

    items = client.get("/api/v1/domains", headers=auth_headers).get_json()["items"]
    assert [d["hostname"] for d in items] == ["a.shop"]


def test_public_lookup(client, tenant) -> None:
    tenant.primary_page_slug = "launch"
    db.session.commit()
    make_domain(tenant)
    make_domain(tenant, hostname="pending.shop", status="pending")
    make_domain(tenant, hostname="off.shop", is_active=False)

    response = client.get("/api/v1/public/domains/shop.other.com")
    assert response.status_code == 200
    assert response.get_json() == {"store_slug": "acme", "primary_page_slug": "launch"}

    assert client.get("/api/v1/public/domains/pending.shop").status_code == 404
    assert client.get("/api/v1/public/domains/off.shop").status_code == 404
    assert client.get("/api/v1/public/domains/nobody.shop").status_code == 404


def test_sql_routing_end_to_end(client, tenant) -> None:
    """A verified custom domain serves the store's published pages."""
    make_domain(tenant)
    page = make_page(tenant, slug="home", status="published")
    db.session.add(Section(id="s1", tenant_id=tenant.id, page_id=page.id, type="hero", position=0, visible=False, config={"headline": "Hi"}))
    db.session.commit()

    response = client.get("/", base_url="http://shop.other.com")

    assert response.status_code == 200
    body = response.get_json()
    assert body["sections"] == [
        {"id": "s1", "type": "hero", "position": 0, "visible": False, "config": {"headline": "Hi"}}
    ]
    assert body["page_context"]["store"]["slug"] == "acme"
    assert "status" not in body["page_context"]["page"]

    # Draft pages are not served
    make_page(tenant, slug="drafty")
    assert client.get("/drafty", base_url="http://shop.other.com").status_code == 404
