from flask import current_app, g, request, jsonify
from flask_jwt_extended import jwt_required
from storefront.application.domains.manage_domains import create_domain, detach_domain, verify_domain
from storefront.models.domain_mapping import DomainMapping
from storefront.normalizers.domain import normalize_domain
from storefront.utils.decorators import tenant_required, roles_required
from storefront.utils.tenant_scope import tenant_domain_or_404
from . import v1_bp


@v1_bp.route("/domains", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
def add_domain():
    data = request.get_json(silent=True) or {}

    mapping = create_domain(
        tenant_id=g.current_tenant.id,
        data=data,
        platform_domains=current_app.config["PLATFORM_DOMAINS"],
        target=current_app.config["DOMAIN_TARGET"],
    )

    return jsonify(normalize_domain(mapping)), 201


@v1_bp.route("/domains", methods=["GET"])
@jwt_required()
@tenant_required
def list_domains():
    mappings = (
        DomainMapping.query
        .filter_by(tenant_id=g.current_tenant.id)
        .order_by(DomainMapping.created_at.asc())
        .all()
    )

    return jsonify({"items": [normalize_domain(m) for m in mappings]})


@v1_bp.route("/domains/<domain_id>/verify", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
def verify(domain_id):
    mapping = tenant_domain_or_404(domain_id)

    verify_domain(
        mapping=mapping,
        verifier=current_app.extensions["domain_verifier"],
        resolver=current_app.extensions.get("domain_resolver"),
    )

    return jsonify(normalize_domain(mapping)), 200


@v1_bp.route("/domains/<domain_id>", methods=["DELETE"])
@jwt_required()
@tenant_required
@roles_required("admin")
def remove_domain(domain_id):
    mapping = tenant_domain_or_404(domain_id)

    detach_domain(
        mapping=mapping,
        resolver=current_app.extensions.get("domain_resolver"),
    )

    return "", 204
