import logging

from flask import request, g, jsonify

from storefront.domain.routing.classification import strip_port
from storefront.domain.routing.request_router import (
    PASSTHROUGH,
    RouteDecision,
    RouterSettings,
    is_passthrough_path,
    route_request,
)
from storefront.extensions import db
from storefront.models.tenant import Tenant

logger = logging.getLogger(__name__)

ORIGINAL_PATH_KEY = "storefront.original_path"
CLASSIFICATION_KEY = "storefront.classification"


class CustomDomainRouter:
    """
    WSGI middleware that maps custom-domain requests onto tenant routes.

    Runs before Flask matches the URL, so a rewrite only has to replace
    ``PATH_INFO``. The host classification and the path the client asked for
    are left in the environ for the views.
    """

    def __init__(self, wsgi_app, resolver, settings: RouterSettings):
        self.wsgi_app = wsgi_app
        self.resolver = resolver
        self.settings = settings

    def decide(self, host: str, path: str):
        if is_passthrough_path(path, self.settings.passthrough_prefixes + (self.settings.not_found_path,)):
            return None, RouteDecision(PASSTHROUGH)

        classification = self.resolver.classify(strip_port(host))
        return classification, route_request(classification, path, self.settings)

    def __call__(self, environ, start_response):
        host = environ.get("HTTP_HOST") or environ.get("SERVER_NAME", "")
        path = environ.get("PATH_INFO") or "/"

        classification, decision = self.decide(host, path)
        environ[CLASSIFICATION_KEY] = classification

        if decision.rewrites:
            logger.debug("Rewriting %s%s -> %s", host, path, decision.path)
            environ[ORIGINAL_PATH_KEY] = path
            environ["PATH_INFO"] = decision.path

        return self.wsgi_app(environ, start_response)


def tenant_middleware(app, resolver):
    settings = RouterSettings(
        passthrough_prefixes=tuple(app.config["PASSTHROUGH_PREFIXES"]),
        default_page_slug=app.config["DEFAULT_PAGE_SLUG"],
        not_found_path=app.config["NOT_FOUND_PATH"],
    )
    app.wsgi_app = CustomDomainRouter(app.wsgi_app, resolver, settings)
    app.extensions["domain_resolver"] = resolver

    @app.before_request
    def load_tenant():
        g.current_tenant = None

        tenant_id = request.headers.get("X-Tenant-ID")
        if not tenant_id:
            return None

        tenant = db.session.get(Tenant, tenant_id)
        if not tenant or not tenant.is_active:
            return jsonify({"error": "Invalid tenant"}), 404

        # Attach tenant to global context
        g.current_tenant = tenant
        return None
