from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .models import tenant, page, section, domain_mapping  # noqa: F401  (register mappers)
from .api.v1 import v1_bp
from .views.storefront import storefront_bp
from .middleware.tenant_middleware import tenant_middleware
from .errors import register_error_handlers
from .domain.routing.domain_resolver import DomainResolver
from .gateways.domain_lookup import HttpDomainLookup, SqlDomainLookup
from .gateways.domain_verifier import DnsDomainVerifier
from .utils.logger import setup_logger
from flask_swagger_ui import get_swaggerui_blueprint
import os


def build_domain_resolver(app: Flask) -> DomainResolver:
    if app.config["DOMAIN_LOOKUP_MODE"] == "http":
        lookup = HttpDomainLookup(
            app.config["DOMAIN_LOOKUP_URL"],
            timeout=app.config["DOMAIN_LOOKUP_TIMEOUT"],
        )
    else:
        lookup = SqlDomainLookup(app)

    return DomainResolver(
        platform_domains=app.config["PLATFORM_DOMAINS"],
        lookup=lookup,
        ttl=app.config["DOMAIN_CACHE_TTL"],
        resolve_parent_domains=app.config["RESOLVE_PARENT_DOMAINS"],
    )


def create_app(config_name: str = "development", resolver=None, verifier=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    setup_logger(level=app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    app.extensions["domain_verifier"] = verifier or DnsDomainVerifier()

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    tenant_middleware(app, resolver or build_domain_resolver(app))

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    app.register_blueprint(storefront_bp)
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO TENANT)
    # -------------------------------------------------
    @app.route("/openapi/storefront.yaml", methods=["GET"], endpoint="openapi_storefront")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "storefront_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("storefront_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/storefront.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Storefront Builder API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
