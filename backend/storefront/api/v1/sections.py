from flask import request, jsonify
from flask_jwt_extended import jwt_required
from storefront.application.builder.save_sections import apply_section_ops, save_sections
from storefront.catalog.sections import section_types_for, SECTION_DEFAULTS
from storefront.gateways.section_gateway import SqlSectionGateway
from storefront.normalizers.section import normalize_section
from storefront.utils.decorators import tenant_required, roles_required
from storefront.utils.optimistic_lock import enforce_optimistic_lock
from storefront.utils.tenant_scope import tenant_page_or_404
from . import v1_bp


def _sections_response(page, sections, **extra):
    response = jsonify({
        "page_id": page.id,
        "sections": [normalize_section(s) for s in sections],
        **extra,
    })
    if page.updated_at is not None:
        response.last_modified = page.updated_at
    return response


@v1_bp.route("/section-types", methods=["GET"])
@jwt_required()
def list_section_types():
    kind = request.args.get("kind")

    return jsonify({
        "items": [
            {**meta, "default_config": SECTION_DEFAULTS.get(meta["type"], {})}
            for meta in section_types_for(kind)
        ]
    })


@v1_bp.route("/pages/<page_id>/sections", methods=["GET"])
@jwt_required()
@tenant_required
def get_sections(page_id):
    page = tenant_page_or_404(page_id)
    gateway = SqlSectionGateway()

    return _sections_response(page, gateway.load_sections(page.id))


@v1_bp.route("/pages/<page_id>/sections", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required("admin", "editor")
def replace_sections(page_id):
    page = tenant_page_or_404(page_id)

    # Opt-in: clients sending If-Unmodified-Since get a 409 instead of
    # overwriting someone else's save.
    enforce_optimistic_lock(page)

    data = request.get_json(silent=True)
    sections = data.get("sections") if isinstance(data, dict) else None
    gateway = SqlSectionGateway()

    save_sections(page=page, gateway=gateway, sections=sections)

    return _sections_response(page, gateway.load_sections(page.id))


@v1_bp.route("/pages/<page_id>/sections/ops", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin", "editor")
def run_section_ops(page_id):
    page = tenant_page_or_404(page_id)
    enforce_optimistic_lock(page)

    data = request.get_json(silent=True)
    ops = data.get("ops") if isinstance(data, dict) else None
    store = apply_section_ops(page=page, gateway=SqlSectionGateway(), ops=ops)

    return _sections_response(
        page,
        store.sections,
        selected_section_id=store.selected_section_id,
    )
