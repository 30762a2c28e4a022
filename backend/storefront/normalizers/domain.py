def normalize_domain(mapping):
    data = {
        "id": mapping.id,
        "hostname": mapping.hostname,
        "status": mapping.status,
        "is_active": mapping.is_active,
        "verification_method": mapping.verification_method,
        "expected_target": mapping.expected_target,
        "verified_at": mapping.verified_at.isoformat() if mapping.verified_at else None,
        "last_error": mapping.last_error,
    }

    if mapping.verification_method == "txt":
        data["dns_record"] = {
            "type": "TXT",
            "name": mapping.txt_record_name,
            "value": mapping.verification_token,
        }
    else:
        data["dns_record"] = {
            "type": "A",
            "name": mapping.hostname,
            "value": mapping.expected_target,
        }

    return data
