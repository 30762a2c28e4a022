"""
Domain lookup collaborators used by the domain resolver.

Both return ``{"store_slug": ..., "primary_page_slug": ...}`` for a verified,
active mapping and ``None`` otherwise. Transport problems are raised; the
resolver folds them into a not-found result.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from storefront.models.domain_mapping import DomainMapping
from storefront.models.tenant import Tenant

logger = logging.getLogger(__name__)


def domain_record(tenant: Tenant) -> Dict[str, Any]:
    return {
        "store_slug": tenant.slug,
        "primary_page_slug": tenant.primary_page_slug,
    }


def find_routable_mapping(hostname: str) -> Optional[DomainMapping]:
    mapping = DomainMapping.query.filter_by(
        hostname=hostname.lower(),
        status="verified",
        is_active=True,
    ).first()

    if mapping is None or not mapping.tenant or not mapping.tenant.is_active:
        return None
    return mapping


class SqlDomainLookup:
    """Reads the mapping table directly. Needs an application context."""

    def __init__(self, app):
        self.app = app

    def __call__(self, hostname: str) -> Optional[Dict[str, Any]]:
        with self.app.app_context():
            mapping = find_routable_mapping(hostname)
            if mapping is None:
                return None
            return domain_record(mapping.tenant)


class HttpDomainLookup:
    """Calls the public lookup endpoint, ``GET {base_url}/public/domains/<host>``."""

    def __init__(self, base_url: str, timeout: float = 2.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __call__(self, hostname: str) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/public/domains/{quote(hostname, safe='')}"
        response = self.session.get(
            url,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )

        if response.status_code == 404:
            return None
        response.raise_for_status()

        data = response.json()
        # Some deployments wrap payloads in {"data": ...}
        if isinstance(data, dict) and isinstance(data.get("data"), dict):
            data = data["data"]
        return data
