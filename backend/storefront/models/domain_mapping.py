from storefront.extensions import db
from .base import BaseModel, TenantMixin

VERIFICATION_METHODS = ("txt", "a")

class DomainMapping(BaseModel, TenantMixin):
    """
    A custom hostname a merchant attached to their store.

    Only rows that are both ``verified`` and ``is_active`` route traffic.
    """

    __tablename__ = "domain_mappings"

    hostname = db.Column(db.String(255), unique=True, nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="pending", index=True)  # pending, verified, failed
    verification_method = db.Column(db.String(10), nullable=False, default="txt")
    verification_token = db.Column(db.String(64), nullable=False)
    expected_target = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    verified_at = db.Column(db.DateTime(timezone=True), nullable=True)
    last_error = db.Column(db.String(255), nullable=True)

    tenant = db.relationship("Tenant", back_populates="domains")

    @property
    def txt_record_name(self):
        return f"_storefront-verify.{self.hostname}"
