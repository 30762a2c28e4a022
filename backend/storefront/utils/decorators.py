import logging
from functools import wraps

from flask import g, jsonify
from flask_jwt_extended import get_jwt

logger = logging.getLogger(__name__)

# Roles carried in the access token's "role" claim
ROLES = ("admin", "editor", "viewer")


def _deny(message, status):
    logger.info("Access denied: %s", message)
    return jsonify({"error": message}), status


def tenant_required(fn):
    """The X-Tenant-ID store must be the one the token was issued for."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        tenant = getattr(g, "current_tenant", None)
        if tenant is None:
            return _deny("Tenant context missing", 400)

        if get_jwt().get("tenant_id") != tenant.id:
            return _deny("Tenant mismatch", 403)

        return fn(*args, **kwargs)

    return wrapper


def roles_required(*allowed_roles):
    unknown = set(allowed_roles) - set(ROLES)
    if unknown:
        raise ValueError(f"Unknown roles: {', '.join(sorted(unknown))}")

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if get_jwt().get("role") not in allowed_roles:
                return _deny("Insufficient permissions", 403)

            return fn(*args, **kwargs)

        return wrapper

    return decorator
