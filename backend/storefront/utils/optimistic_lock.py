from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import parse
from flask import request

from storefront.domain.invariants.exceptions import StaleWrite, ValidationError

HEADER = "If-Unmodified-Since"


def as_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def parse_http_date(value: str) -> datetime:
    try:
        return as_utc(parse(value))
    except (ValueError, OverflowError) as exc:
        raise ValidationError(
            [{"field": HEADER, "message": "must be an HTTP date"}]
        ) from exc


def is_stale(updated_at: Optional[datetime], client_ts: datetime) -> bool:
    if updated_at is None:
        return False

    # HTTP dates carry whole seconds only
    return as_utc(updated_at).replace(microsecond=0) > client_ts


def enforce_optimistic_lock(entity) -> None:
    """
    Rejects the write with ``StaleWrite`` when the entity changed after the
    client's ``If-Unmodified-Since``. Without the header the last write wins.
    """
    header = request.headers.get(HEADER)
    if not header:
        return

    if is_stale(entity.updated_at, parse_http_date(header)):
        raise StaleWrite(f"{entity.__class__.__name__} {entity.id} was modified by another save")
