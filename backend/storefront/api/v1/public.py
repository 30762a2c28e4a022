from flask import jsonify
from storefront.gateways.domain_lookup import domain_record, find_routable_mapping
from storefront.validation.domains import normalize_hostname
from . import v1_bp


@v1_bp.route("/public/domains/<hostname>", methods=["GET"])
def lookup_domain(hostname):
    """Public: which store serves this verified custom domain."""
    mapping = find_routable_mapping(normalize_hostname(hostname))

    if mapping is None:
        return jsonify({"error": "Domain not found or not verified"}), 404

    return jsonify(domain_record(mapping.tenant)), 200
