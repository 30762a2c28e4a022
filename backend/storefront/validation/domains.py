from typing import Any, Dict, List

from storefront.models.domain_mapping import VERIFICATION_METHODS
from .common import HOSTNAME_RE, error


def normalize_hostname(value: str) -> str:
    return value.strip().lower().rstrip(".")


def validate_domain_create(data: Any, platform_domains=()) -> List[Dict[str, str]]:
    if not isinstance(data, dict):
        return [error("body", "must be a JSON object")]

    errors = []

    hostname = data.get("hostname")
    if not isinstance(hostname, str) or not HOSTNAME_RE.match(normalize_hostname(hostname)):
        errors.append(error("hostname", "must be a valid domain name"))
    else:
        host = normalize_hostname(hostname)
        for base in platform_domains:
            if host == base or host.endswith("." + base):
                errors.append(error("hostname", "platform domains cannot be attached to a store"))
                break

    method = data.get("verification_method", "txt")
    if method not in VERIFICATION_METHODS:
        errors.append(error("verification_method", f"must be one of {', '.join(VERIFICATION_METHODS)}"))

    return errors
