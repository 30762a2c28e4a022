"""
Tests for page CRUD and status changes.
"""

from __future__ import annotations

from conftest import make_headers, make_page
from storefront.extensions import db
from storefront.models.section import Section


def test_create_page(client, tenant, auth_headers) -> None:
    response = client.post(
        "/api/v1/pages",
        json={"title": "Launch", "slug": "launch", "kind": "homepage"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["slug"] == "launch"
    assert body["kind"] == "homepage"
    assert body["status"] == "draft"
    assert body["allowed_transitions"] == ["published", "archived"]
    assert body["sections"] == []


def test_create_page_validation(client, tenant, auth_headers) -> None:
    response = client.post(
        "/api/v1/pages",
        json={"title": "", "slug": "Not A Slug", "kind": "landing"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    fields = {e["field"] for e in response.get_json()["errors"]}
    assert fields == {"title", "slug", "kind"}


def test_duplicate_slug_rejected(client, tenant, auth_headers) -> None:
    make_page(tenant, slug="launch")
    response = client.post("/api/v1/pages", json={"title": "Again", "slug": "launch"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "slug"


def test_same_slug_allowed_for_other_store(client, tenant, other_tenant) -> None:
    make_page(tenant, slug="launch")
    response = client.post(
        "/api/v1/pages",
        json={"title": "Launch", "slug": "launch"},
        headers=make_headers(other_tenant),
    )
    assert response.status_code == 201


def test_list_and_filter_pages(client, tenant, other_tenant, auth_headers) -> None:
    make_page(tenant, slug="one")
    make_page(tenant, slug="home", kind="homepage")
    make_page(other_tenant, slug="theirs")

    items = client.get("/api/v1/pages", headers=auth_headers).get_json()["items"]
    assert sorted(p["slug"] for p in items) == ["home", "one"]

    items = client.get("/api/v1/pages?kind=homepage", headers=auth_headers).get_json()["items"]
    assert [p["slug"] for p in items] == ["home"]


def test_update_page(client, tenant, auth_headers) -> None:
    page = make_page(tenant)
    response = client.put(f"/api/v1/pages/{page.id}", json={"title": "Winter Sale"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["title"] == "Winter Sale"

    unchanged = client.put(f"/api/v1/pages/{page.id}", json={"title": "Winter Sale"}, headers=auth_headers)
    assert unchanged.status_code == 400


def test_publish_requires_sections(client, tenant, auth_headers) -> None:
    page = make_page(tenant)
    url = f"/api/v1/pages/{page.id}/status"

    response = client.post(url, json={"status": "published"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "InvariantViolation"

    db.session.add(Section(id="s1", tenant_id=tenant.id, page_id=page.id, type="hero", position=0, visible=True, config={}))
    db.session.commit()

    response = client.post(url, json={"status": "published"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {"page_id": page.id, "status": "published"}


def test_illegal_transition(client, tenant, auth_headers) -> None:
    page = make_page(tenant)
    response = client.post(f"/api/v1/pages/{page.id}/status", json={"status": "draft"}, headers=auth_headers)

    assert response.status_code == 409


def test_delete_page_removes_sections(client, tenant, auth_headers) -> None:
    page = make_page(tenant)
    db.session.add(Section(id="s1", tenant_id=tenant.id, page_id=page.id, type="hero", position=0, visible=True, config={}))
    db.session.commit()

    response = client.delete(f"/api/v1/pages/{page.id}", headers=auth_headers)

    assert response.status_code == 204
    assert Section.query.filter_by(id="s1").first() is None


def test_admin_endpoints_need_token(client, tenant) -> None:
    response = client.get("/api/v1/pages", headers={"X-Tenant-ID": tenant.id})
    assert response.status_code == 401


def test_unknown_tenant_header(client, tenant, auth_headers) -> None:
    response = client.get("/api/v1/pages", headers={**auth_headers, "X-Tenant-ID": "nope"})
    assert response.status_code == 404
