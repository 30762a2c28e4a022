from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Mapping, Optional

from .classification import (
    NOT_FOUND,
    PLATFORM,
    Classification,
    NotFound,
    Tenant,
    strip_port,
)

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60


@dataclass(frozen=True)
class CacheEntry:
    result: Classification
    expires_at: float


def is_expired(entry: CacheEntry, now: float) -> bool:
    return now >= entry.expires_at


def is_platform_host(hostname: str, platform_domains: Iterable[str]) -> bool:
    for base in platform_domains:
        if hostname == base or hostname.endswith("." + base):
            return True
    return False


def _tenant_from_record(record: Optional[Mapping], page_slug_override=None) -> Classification:
    if not isinstance(record, Mapping) or not record:
        return NOT_FOUND

    store_slug = record.get("store_slug")
    if not isinstance(store_slug, str) or not store_slug:
        return NOT_FOUND

    primary = record.get("primary_page_slug")
    if not isinstance(primary, str) or not primary:
        primary = None

    return Tenant(
        store_slug=store_slug,
        primary_page_slug=primary,
        page_slug_override=page_slug_override,
    )


class DomainResolver:
    """
    Classifies hostnames as platform, tenant custom domain, or not found.

    Lookup results (including failures) are cached per hostname for ``ttl``
    seconds. Entries are replaced whole, never edited, so concurrent misses
    for the same host can race without a lock: both write an equivalent
    entry and the last one stays.

    ``lookup`` is any callable taking a bare hostname and returning a mapping
    with ``store_slug`` and optional ``primary_page_slug`` for an active,
    verified domain, or ``None``. Anything it raises is treated as not found.
    """

    def __init__(
        self,
        platform_domains: Iterable[str],
        lookup: Callable[[str], Optional[Mapping]],
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        resolve_parent_domains: bool = False,
    ):
        self.platform_domains = tuple(d.strip().lower() for d in platform_domains if d.strip())
        self.lookup = lookup
        self.ttl = ttl
        self.clock = clock
        self.resolve_parent_domains = resolve_parent_domains
        self._cache: Dict[str, CacheEntry] = {}
        self._next_sweep = float("-inf")

    def classify(self, hostname: str) -> Classification:
        host = strip_port(hostname)

        if not host:
            return NOT_FOUND

        if is_platform_host(host, self.platform_domains):
            return PLATFORM

        now = self.clock()
        entry = self._cache.get(host)
        if entry is not None and not is_expired(entry, now):
            return entry.result

        logger.debug("Domain cache miss for %s", host)
        result = self._resolve(host)
        self._evict_expired(now)
        self._cache[host] = CacheEntry(result=result, expires_at=now + self.ttl)
        return result

    def _evict_expired(self, now: float) -> None:
        """Drop expired entries, at most once per TTL period."""
        if now < self._next_sweep:
            return
        self._next_sweep = now + self.ttl

        for host, entry in list(self._cache.items()):
            if is_expired(entry, now) and self._cache.get(host) is entry:
                self._cache.pop(host, None)

    def _resolve(self, host: str) -> Classification:
        result = self._lookup(host)

        if isinstance(result, NotFound) and self.resolve_parent_domains:
            labels = host.split(".")
            if len(labels) > 2:
                parent = ".".join(labels[1:])
                parent_result = self._lookup(parent, page_slug_override=labels[0])
                if isinstance(parent_result, Tenant):
                    return parent_result

        return result

    def _lookup(self, host: str, page_slug_override=None) -> Classification:
        try:
            record = self.lookup(host)
        except Exception as exc:
            logger.warning("Domain lookup for %s failed: %s", host, exc)
            return NOT_FOUND

        result = _tenant_from_record(record, page_slug_override)
        if isinstance(result, NotFound):
            logger.info("No verified store for domain %s", host)
        return result

    def invalidate(self, hostname: str) -> None:
        """Forget a host and any subdomain that may have resolved through it."""
        host = strip_port(hostname)
        self._cache.pop(host, None)

        suffix = "." + host
        for cached_host in list(self._cache):
            if cached_host.endswith(suffix):
                self._cache.pop(cached_host, None)

    def clear(self) -> None:
        self._cache.clear()

    def cached(self, hostname: str) -> Optional[CacheEntry]:
        return self._cache.get(strip_port(hostname))

    def __len__(self) -> int:
        return len(self._cache)
