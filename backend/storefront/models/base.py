from datetime import datetime, timezone
import uuid

from sqlalchemy.orm import declared_attr
from storefront.extensions import db


def utc_now():
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid.uuid4())


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    def touch(self):
        """Bump ``updated_at`` when only child rows changed."""
        self.updated_at = utc_now()


class TenantMixin:
    """Rows owned by one store."""

    @declared_attr
    def tenant_id(cls):
        return db.Column(
            db.String(36),
            db.ForeignKey("tenants.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
