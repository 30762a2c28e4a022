"""
Tests for hostname classification and its cache.
"""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest

from storefront.domain.routing.classification import NotFound, Platform, Tenant, strip_port
from storefront.domain.routing.domain_resolver import CacheEntry, DomainResolver, is_expired


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_resolver(lookup, clock=None, **kwargs):
    return DomainResolver(
        platform_domains=["example.com"],
        lookup=lookup,
        ttl=60,
        clock=clock or FakeClock(),
        **kwargs,
    )


@pytest.mark.parametrize("host,expected", [
    ("example.com", "example.com"),
    ("Example.COM:8080", "example.com"),
    ("shop.other.com.", "shop.other.com"),
    ("[::1]:5000", "::1"),
    ("", ""),
])
def test_strip_port(host, expected) -> None:
    assert strip_port(host) == expected


@pytest.mark.parametrize("host", ["example.com", "admin.example.com", "a.b.example.com:3000"])
def test_platform_hosts(host) -> None:
    """Platform base domain and its subdomains never hit the lookup."""
    lookup = MagicMock()
    resolver = make_resolver(lookup)

    assert resolver.classify(host) == Platform()
    lookup.assert_not_called()


def test_lookalike_host_is_not_platform() -> None:
    lookup = MagicMock(return_value=None)
    resolver = make_resolver(lookup)

    assert resolver.classify("notexample.com") == NotFound()
    lookup.assert_called_once_with("notexample.com")


def test_verified_mapping_resolves_to_tenant() -> None:
    lookup = MagicMock(return_value={"store_slug": "acme", "primary_page_slug": "launch"})
    resolver = make_resolver(lookup)

    assert resolver.classify("shop.other.com:443") == Tenant("acme", "launch")
    lookup.assert_called_once_with("shop.other.com")


def test_cache_hit_within_ttl_and_refresh_after_expiry() -> None:
    """A second call inside the TTL is served from cache; after it, lookup runs again."""
    clock = FakeClock()
    lookup = MagicMock(return_value={"store_slug": "acme"})
    resolver = make_resolver(lookup, clock=clock)

    assert resolver.classify("shop.other.com") == Tenant("acme")
    clock.now += 59
    assert resolver.classify("shop.other.com") == Tenant("acme")
    assert lookup.call_count == 1

    clock.now += 1
    assert resolver.classify("shop.other.com") == Tenant("acme")
    assert lookup.call_count == 2


@pytest.mark.parametrize("outcome", [
    None,
    {},
    {"store_slug": ""},
    {"store_slug": 42},
    ["not", "a", "mapping"],
])
def test_not_found_and_malformed_results(outcome) -> None:
    lookup = MagicMock(return_value=outcome)
    resolver = make_resolver(lookup)

    assert resolver.classify("shop.other.com") == NotFound()


@pytest.mark.parametrize("error", [TimeoutError("slow"), ConnectionError("down"), ValueError("bad json")])
def test_lookup_errors_fold_into_cached_not_found(error) -> None:
    """Failures look like not-found and are cached like it."""
    clock = FakeClock()
    lookup = MagicMock(side_effect=error)
    resolver = make_resolver(lookup, clock=clock)

    assert resolver.classify("broken.shop") == NotFound()
    assert resolver.classify("broken.shop") == NotFound()
    assert lookup.call_count == 1

    clock.now += 60
    resolver.classify("broken.shop")
    assert lookup.call_count == 2


def test_is_expired_boundary() -> None:
    entry = CacheEntry(result=NotFound(), expires_at=100.0)
    assert not is_expired(entry, 99.999)
    assert is_expired(entry, 100.0)


def test_cache_entries_are_replaced_not_mutated() -> None:
    clock = FakeClock()
    lookup = MagicMock(side_effect=[None, {"store_slug": "acme"}])
    resolver = make_resolver(lookup, clock=clock)

    resolver.classify("shop.other.com")
    first = resolver.cached("shop.other.com")
    clock.now += 61
    resolver.classify("shop.other.com")
    second = resolver.cached("shop.other.com")

    assert first is not second
    assert first.result == NotFound()
    assert second.result == Tenant("acme")


def test_invalidate_forces_fresh_lookup() -> None:
    lookup = MagicMock(side_effect=[None, {"store_slug": "acme"}])
    resolver = make_resolver(lookup)

    assert resolver.classify("shop.other.com") == NotFound()
    resolver.invalidate("shop.other.com:80")
    assert resolver.classify("shop.other.com") == Tenant("acme")


def test_parent_domain_fallback_is_opt_in() -> None:
    def lookup(host):
        return {"store_slug": "brand"} if host == "brand.com" else None

    plain = make_resolver(lookup)
    assert plain.classify("launch.brand.com") == NotFound()

    with_parent = make_resolver(lookup, resolve_parent_domains=True)
    assert with_parent.classify("launch.brand.com") == Tenant("brand", None, "launch")
    assert with_parent.classify("brand.com") == Tenant("brand")


def test_concurrent_misses_converge() -> None:
    """Simultaneous misses may both look up but leave one consistent entry."""
    barrier = threading.Barrier(2)
    calls = []

    def lookup(host):
        calls.append(host)
        return {"store_slug": "acme"}

    resolver = make_resolver(lookup)
    results = []

    def worker():
        barrier.wait()
        results.append(resolver.classify("shop.other.com"))

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [Tenant("acme"), Tenant("acme")]
    assert 1 <= len(calls) <= 2
    assert resolver.cached("shop.other.com").result == Tenant("acme")

    resolver.classify("shop.other.com")
    assert len(calls) <= 2


def test_expired_hosts_are_evicted() -> None:
    """Hosts nobody asks for again do not pile up once their TTL is over."""
    clock = FakeClock()
    resolver = make_resolver(MagicMock(return_value=None), clock=clock)

    for i in range(500):
        resolver.classify(f"junk-{i}.test")
    assert len(resolver) == 500

    clock.now += 61
    resolver.classify("fresh.test")

    assert len(resolver) == 1
    assert resolver.cached("fresh.test") is not None
    assert resolver.cached("junk-0.test") is None


def test_invalidate_parent_drops_subdomains_resolved_through_it() -> None:
    records = {"brand.com": {"store_slug": "brand"}}
    resolver = make_resolver(lambda host: records.get(host), resolve_parent_domains=True)

    assert resolver.classify("launch.brand.com") == Tenant("brand", None, "launch")
    assert resolver.classify("other.com") == NotFound()

    del records["brand.com"]
    resolver.invalidate("brand.com")

    assert resolver.cached("other.com") is not None
    assert resolver.classify("launch.brand.com") == NotFound()
