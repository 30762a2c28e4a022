from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .classification import Classification, NotFound, Platform, Tenant

PASSTHROUGH = "passthrough"
REWRITE = "rewrite"
NOT_FOUND_PAGE = "not_found"


@dataclass(frozen=True)
class RouteDecision:
    action: str
    path: Optional[str] = None

    @property
    def rewrites(self) -> bool:
        return self.action in (REWRITE, NOT_FOUND_PAGE)


@dataclass(frozen=True)
class RouterSettings:
    passthrough_prefixes: tuple = ("/api", "/static")
    default_page_slug: str = "home"
    not_found_path: str = "/404"


def is_passthrough_path(path: str, prefixes: Iterable[str]) -> bool:
    for prefix in prefixes:
        prefix = prefix.rstrip("/")
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def path_segments(path: str) -> list:
    return [segment for segment in path.split("/") if segment]


def route_request(
    classification: Classification,
    path: str,
    settings: RouterSettings,
) -> RouteDecision:
    """
    Decide what to do with a request once its host is classified.

    Tenant hosts get ``/`` and single-segment paths rewritten to
    ``/{store}/{page}``. The rewrite target always has two segments, so a
    rewritten path never hits the single-segment branch again. Deeper paths
    on a tenant host are left alone.
    """
    if isinstance(classification, Platform):
        return RouteDecision(PASSTHROUGH)

    if isinstance(classification, NotFound) or not isinstance(classification, Tenant):
        return RouteDecision(NOT_FOUND_PAGE, settings.not_found_path)

    store_slug = classification.store_slug

    if classification.page_slug_override:
        return RouteDecision(REWRITE, f"/{store_slug}/{classification.page_slug_override}")

    segments = path_segments(path)

    if not segments:
        page_slug = classification.primary_page_slug or settings.default_page_slug
        return RouteDecision(REWRITE, f"/{store_slug}/{page_slug}")

    if len(segments) == 1:
        return RouteDecision(REWRITE, f"/{store_slug}/{segments[0]}")

    return RouteDecision(PASSTHROUGH)
