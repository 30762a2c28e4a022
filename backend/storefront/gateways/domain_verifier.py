from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationResult:
    success: bool
    records: List[str]
    error: Optional[str] = None


class DomainVerifier(Protocol):
    def verify(self, mapping) -> VerificationResult: ...


class DnsDomainVerifier:
    """
    Checks that the merchant published the expected DNS record.

    ``txt`` mappings need the token at ``_storefront-verify.<host>``; ``a``
    mappings need the host to resolve to the platform target.
    """

    def __init__(self, lifetime: float = 5.0):
        self.lifetime = lifetime

    def _resolve(self, name: str, rdtype: str) -> List[str]:
        answer = dns.resolver.resolve(name, rdtype, lifetime=self.lifetime)
        if rdtype == "TXT":
            return [b"".join(r.strings).decode("utf-8", "replace") for r in answer]
        return [r.to_text() for r in answer]

    def verify(self, mapping) -> VerificationResult:
        if mapping.verification_method == "txt":
            name, rdtype, expected = mapping.txt_record_name, "TXT", mapping.verification_token
        else:
            name, rdtype, expected = mapping.hostname, "A", mapping.expected_target

        try:
            records = self._resolve(name, rdtype)
        except dns.exception.DNSException as exc:
            logger.warning("DNS check for %s (%s) failed: %s", name, rdtype, exc)
            return VerificationResult(success=False, records=[], error=str(exc) or exc.__class__.__name__)

        return VerificationResult(success=expected in records, records=records)
