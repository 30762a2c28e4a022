from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from storefront.application.cms.create_page import create_page as create_page_use_case
from storefront.application.cms.update_page import update_page as update_page_use_case
from storefront.application.cms.delete_page import delete_page as delete_page_use_case
from storefront.application.cms.change_page_status import change_page_status
from storefront.models.page import Page, PAGE_KINDS
from storefront.normalizers.page import normalize_page
from storefront.utils.decorators import tenant_required, roles_required
from storefront.utils.tenant_scope import tenant_page_or_404
from . import v1_bp


@v1_bp.route("/pages", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin", "editor")
def create_page():
    data = request.get_json(silent=True) or {}
    page = create_page_use_case(tenant_id=g.current_tenant.id, data=data)

    return jsonify(normalize_page(page, admin=True)), 201


@v1_bp.route("/pages", methods=["GET"])
@jwt_required()
@tenant_required
def list_pages():
    query = Page.query.filter_by(tenant_id=g.current_tenant.id)

    kind = request.args.get("kind")
    if kind in PAGE_KINDS:
        query = query.filter_by(kind=kind)

    pages = query.order_by(Page.created_at.asc()).all()

    return jsonify({
        "items": [normalize_page(p, admin=True, include_sections=False) for p in pages]
    })


@v1_bp.route("/pages/<page_id>", methods=["GET"])
@jwt_required()
@tenant_required
def get_page(page_id):
    page = tenant_page_or_404(page_id)
    return jsonify(normalize_page(page, admin=True))


@v1_bp.route("/pages/<page_id>", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required("admin", "editor")
def update_page(page_id):
    page = tenant_page_or_404(page_id)
    data = request.get_json(silent=True) or {}

    update_page_use_case(page=page, data=data)

    return jsonify(normalize_page(page, admin=True)), 200


@v1_bp.route("/pages/<page_id>/status", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
def set_page_status(page_id):
    page = tenant_page_or_404(page_id)
    data = request.get_json(silent=True) or {}

    return jsonify(change_page_status(page=page, data=data)), 200


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
@jwt_required()
@tenant_required
@roles_required("admin")
def delete_page(page_id):
    page = tenant_page_or_404(page_id)
    delete_page_use_case(page=page)

    return "", 204
