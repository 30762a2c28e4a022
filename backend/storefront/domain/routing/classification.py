from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Platform:
    """The host is one of the operator's own domains."""


@dataclass(frozen=True)
class Tenant:
    """The host is a verified custom domain owned by ``store_slug``."""

    store_slug: str
    primary_page_slug: Optional[str] = None
    # Set when the host was matched through its parent domain; the leading
    # label names the page to serve.
    page_slug_override: Optional[str] = None


@dataclass(frozen=True)
class NotFound:
    """Unknown, unverified, or unresolvable host."""


Classification = Union[Platform, Tenant, NotFound]

PLATFORM = Platform()
NOT_FOUND = NotFound()


def strip_port(host: str) -> str:
    host = (host or "").strip().lower()

    # Bracketed IPv6 literal, e.g. "[::1]:8080"
    if host.startswith("["):
        end = host.find("]")
        if end != -1:
            return host[1:end]

    if host.count(":") == 1:
        host = host.split(":", 1)[0]

    return host.rstrip(".")
