from flask import Blueprint, current_app, jsonify, request
from storefront.middleware.tenant_middleware import ORIGINAL_PATH_KEY
from storefront.models.page import Page
from storefront.models.tenant import Tenant
from storefront.normalizers.page import normalize_render_payload

storefront_bp = Blueprint("storefront", __name__)

NOT_FOUND_HTML = (
    "<!doctype html>"
    "<html><head><title>Page not found</title></head>"
    "<body><h1>Page not found</h1>"
    "<p>The page you are looking for does not exist.</p></body></html>"
)


def not_found_page():
    return current_app.response_class(
        NOT_FOUND_HTML,
        status=404,
        mimetype="text/html",
    )


@storefront_bp.route("/404", methods=["GET"])
def not_found():
    return not_found_page()


@storefront_bp.route("/<store_slug>/<page_slug>", methods=["GET"])
def render_page(store_slug, page_slug):
    """Renderer payload for a published page of an active store."""
    tenant = Tenant.query.filter_by(slug=store_slug, is_active=True).first()
    if tenant is None:
        return not_found_page()

    page = Page.find_published(tenant.id, page_slug)
    if page is None:
        return not_found_page()

    payload = normalize_render_payload(page, tenant)
    payload["page_context"]["request_path"] = request.environ.get(ORIGINAL_PATH_KEY, request.path)

    return jsonify(payload)
